"""Text pictures shown by the walking and battle game."""

from __future__ import annotations

from collections.abc import Iterable


def _block(lines: Iterable[str], before: str = "", after: str = "") -> str:
    return before + "".join(f"{line}\n" for line in lines) + after


_DICE = _block(
    [
        "\t\t\t\t    ____",
        "\t\t\t\t   /\\' .\\    _____",
        "\t\t\t\t  /: \\___\\  / .  /\\",
        "\t\t\t\t  \\' / . / /____/..\\",
        "\t\t\t\t   \\/___/  \\'  '\\  /",
        "\t\t\t\t            \\'__'\\/",
    ]
)

_CASTLE = (
    _block(
        [
            "\t\t                             -|             |-",
            "\t\t         -|                  [-_-_-_-_-_-_-_-]                  |-",
            "\t\t         [-_-_-_-_-]          |             |          [-_-_-_-_-]",
            "\t\t          | o   o |           [  0   0   0  ]           | o   o |",
            "\t\t           |     |    -|       |           |       |-    |     |",
            "\t\t           |     |_-___-___-___-|         |-___-___-___-_|     |",
            "\t\t           |  o  ]              [    0    ]              [  o  |",
            "\t\t           |     ]   o   o   o  [ _______ ]  o   o   o   [     | ----__________",
            "\t\t_____----- |     ]              [ ||||||| ]              [     |",
            "\t\t           |     ]              [ ||||||| ]              [     |",
            "\t\t       _-_-|_____]--------------[_|||||||_]--------------[_____|-_-_",
            "\t\t      ( (__________------------_____________-------------_________) )",
        ],
        before="\n\n",
    )
    + "\t\t                              Back  To  Home."
    + "\n\n"
)

_ROAD = _block(
    [
        "\t\t    .    _    +     .  ______   .          .",
        "\t\t (      /|\\      .    |      \\      .   +",
        "\t\t     . |||||     _    | |   | | ||         .",
        "\t\t.      |||||    | |  _| | | | |_||    .",
        "\t\t   /\\  ||||| .  | | |   | |      |       .",
        "\t\t__||||_|||||____| |_|_____________\\__________",
        "\t\t. |||| |||||  /   _____      _____  .   .",
        "\t\t  |||| ||||| ||||   .   .  .         ________",
        "\t\t . \\|`-'|||| ||||    __________       .    .",
        "\t\t    \\__ |||| ||||      .          .     .",
        "\t\t __    ||||`-'|||  .       .    __________",
        "\t\t   . _ ||||| . _               .   _________",
        "\t\t_   ___|||||__  _ \\\\--//    .          _",
        "\t\t     _ `---'    .)=\\oo|=(.   _   .   .    .\t\t 집에 돌아가자...",
        "\t\t_  ^      .  -    . \\.|",
    ],
    before="\n\n",
    after="\n\n",
)

_MOUNTAIN = _block(
    [
        "\t\t    .                  .-.    .  _   *     _   .",
        "\t\t           *          /   \\     ((       _/ \\       *    .",
        "\t\t         _    .   .--'\\/\\_ \\     `      /    \\  *    ___",
        "\t\t     *  / \\_    _/ ^      \\/\\'__        //  /  __/   \\ *",
        "\t\t       /    \\  /    .'   _/  /  \\  *' /    /  / .`'\\_/\\   .",
        "\t\t  .   /\\/\\  /\\/ :' __  ^/  ^/    `--./.'  ^  `-. _    _:\\ _",
        "\t\t     /    \\/  \\  _/  \\-' __/.' ^ _   \\_   .'\\   _/  .  __/ \\",
        "\t\t   /\\  .-   `. \\/     \\ / -.   _/ \\ -. `_/   \\ /    `._/  ^  \\",
        "\t\t  /  `-.__ ^   / .-'.--'    . /    `--./ .-'  `-.  `-. `.  -  `.",
        "\t\t@/        `.  / /      `-.   /  .-'   / .   .'   \\    \\  \\  .-  \\",
    ],
    before="\n\n",
    after="\n\n",
)

_MOUNTAIN_HEAL = _block(
    [
        "\t\t                            .--",
        "\t\t                           F   .-'",
        "\t\t                          F   J",
        "\t\t                         I    I",
        "\t\t                          L   `.",
        "\t\t                           L    `-._,",
        "\t\t                            `-.__.-'            ##",
        "\t\t                                               ###",
        "\t\t                        #                      ####",
        "\t\t              _____   ##                 .---#####-...__",
        "\t\t          .--'     `-###          .--..-'    ######     `---....",
        "\t\t _____.----.        ###`.._____ .'          #######",
        "\t\t                    ###       /       -.    ####### _.---",
        "\t\t                    ###     .(              #######",
        "\t\t                     #      : `--...        ######",
        "\t\t                     #       `.     ``.     ######",
        "\t\t                               :       :.    #####",
    ],
    before="\n\n",
    after="\n\n",
)

_RIVER = _block(
    [
        "\t\t                              _____,,,\\//,,\\\\,/,",
        "\t\t                             /-- --- --- -----",
        "\t\t                            ///--- --- -- - ----",
        "\t\t                           o////- ---- --- --",
        "\t\t                           !!//o/---  -- --",
        "\t\t                         o*) !///,~,,\\\\,\\/,,/,//,,",
        "\t\t                           o!*!o'(\\          /\\",
        "\t\t                         | ! o \", ) \\ / \\ / \\ / \\ / \\",
        "\t\t                        o  !o! !!|    \\/  \\/     /",
        "\t\t                        o o ! * !` | \\  /       \\",
        "\t\t                           ' !o!':\\  \\\\        \\",
        "\t\t                            ( ('|  \\  `._______/",
        "\t\t////\\\\\\,,\\///,,,,\\,/oO._*  o !*!'`  `.________/",
        "\t\t  ---- -- ------- - -oO*OoOo (o''|           /",
        "\t\t-------  -- - ---- --* oO*OoO *!'| '         /",
        "\t\t ---  -   -----  ---- - oO*OoO!!':o!'       /",
        "\t\t - -  -----  -  --  - *--oO*OoOo!`         /\t\t      여긴 어디 나는 누구...",
    ],
    after="\n\n",
)

_GAME_CLEAR = _block(
    [
        "\t\t\t      `'::::.",
        "\t\t\t        _____A_",
        "\t\t\t       /      /\\",
        "\t\t\t    __/__/\\__/  \\___",
        "\t\t\t---/__|\" '' \"| /___/\\----",
        "\t\t\t   |''|\"'||'\"| |' '||",
        "\t\t\t   |''|\"'||'\"| |' '||",
        '\t\t\t   `""`""))""`"`""""`',
    ],
    before="\n\n집에 도착했다...!",
    after="\n\n",
)

_GAME_OVER = _block(
    [
        "\t\t\t      ,-=-.",
        "\t\t\t     /  +  \\",
        "\t\t\t     | ~~~ |",
        "\t\t\t     |R.I.P|",
        "\t\t\t\\vV,,|_____|V,",
    ]
)

_BAT = _block(
    [
        "    =/" + " " * 17 + "/=",
        "    / \\'._   (\\_/)   _.'/ \\",
        "   / .''._'--(o.o)--'_.''. \\",
        "  /.' _/ |`'=/ \" \\ = `|\\_ `.\\",
        " /` .' `;-,'\\___/',-;/` '. '\\",
        "/.-'       `\\(-V-)/`       `-.\\",
        "`            \"   \"            `",
    ]
)

_BEAR = _block(
    [
        "    ╭─────╮",
        " (O)│ ‾o‾ │(O)",
        "╭─╨─╯╔═══╗╰─╨─╮",
        "│ ╭╮╔╝   ╚╗╭╮ │",
        "╰─╯╔╝     ╚╗╰─╯",
        "   ╚╗     ╔╝",
        "  ╭╯╚╗   ╔╝╰╮",
        "  │ ╭╚═══╝╮ │",
        "  ╰─╯     ╰─╯",
    ]
)

_SLIME = _block(
    [
        " ╭────╮",
        " │\\_/│",
        " │    │",
        "─┴────┴─",
    ]
)

_ART = {
    "dice": _DICE,
    "castle": _CASTLE,
    "road": _ROAD,
    "mountain": _MOUNTAIN,
    "mountain_heal": _MOUNTAIN_HEAL,
    "river": _RIVER,
    "game_clear": _GAME_CLEAR,
    "game_over": _GAME_OVER,
    "bat": _BAT,
    "bear": _BEAR,
    "slime": _SLIME,
}


def art(name: str) -> str:
    """Return the picture called ``name``, exactly as it is printed."""
    try:
        return _ART[name]
    except KeyError:
        raise KeyError(f"no picture named {name!r}") from None


def art_names() -> list[str]:
    """Return the names of every picture."""
    return list(_ART)