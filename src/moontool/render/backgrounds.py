# render/backgrounds.py
#
# Moon backgrounds for the ASCII renderer, one per supported line count.
# Drawn for an aspect ratio of 0.5; '@' marks the maria.
#
# Copyright (C) 1986,1987,1988,1995 by Jef Poskanzer <jef@mail.acme.com>.

from __future__ import annotations

from typing import Dict, Tuple

BACKGROUND_18 = (
    "             .----------.            ",
    "         .--'   o    .   `--.        ",
    "       .'@  @@@@@@ O   .   . `.      ",
    "     .'@@  @@@@@@@@   @@@@   . `.    ",
    "   .'    . @@@@@@@@  @@@@@@    . `.  ",
    "  / @@ o    @@@@@@.   @@@@    O   @\\ ",
    "  |@@@@               @@@@@@     @@| ",
    " / @@@@@   `.-.    . @@@@@@@@  .  @@\\",
    " | @@@@   --`-'  .  o  @@@@@@@      |",
    " |@ @@                 @@@@@@ @@@   |",
    " \\      @@    @   . ()  @@   @@@@@  /",
    "  |   @      @@@         @@@  @@@  | ",
    "  \\  .   @@  @\\  .      .  @@    o / ",
    "   `.   @@@@  _\\ /     .      o  .'  ",
    "     `.  @@    ()---           .'    ",
    "       `.     / |  .    o    .'      ",
    "         `--./   .       .--'        ",
    "             `----------'            ",
)

BACKGROUND_19 = (
    "              .----------.             ",
    "          .--'   o    .   `--.         ",
    "       .-'@  @@@@@@ O   .   . `-.      ",
    "     .' @@  @@@@@@@@   @@@@   .  `.    ",
    "    /     . @@@@@@@@  @@@@@@     . \\   ",
    "   /@@  o    @@@@@@.   @@@@    O   @\\  ",
    "  /@@@@                @@@@@@     @@@\\ ",
    " . @@@@@   `.-./    . @@@@@@@@  .  @@ .",
    " | @@@@   --`-'  .      @@@@@@@       |",
    " |@ @@        `      o  @@@@@@ @@@@   |",
    " |      @@        o      @@   @@@@@@  |",
    " ` .  @       @@     ()   @@@  @@@@   '",
    "  \\     @@   @@@@        . @@   .  o / ",
    "   \\   @@@@  @@\\  .           o     /  ",
    "    \\ . @@     _\\ /    .      .-.  /   ",
    "     `.    .    ()---        `-' .'    ",
    "       `-.    ./ |  .   o     .-'      ",
    "          `--./   .       .--'         ",
    "              `----------'             ",
)

BACKGROUND_21 = (
    "                .----------.               ",
    "           .---'   O   . .  `---.          ",
    "        .-'@ @@@@@@  .  @@@@@    `-.       ",
    "      .'@@  @@@@@@@@@  @@@@@@@   .  `.     ",
    "     /   o  @@@@@@@@@  @@@@@@@      . \\    ",
    "    /@  o   @@@@@@@@@.  @@@@@@@   O    \\   ",
    "   /@@@  .   @@@@@@o   @@@@@@@@@@     @@\\  ",
    "  /@@@@@            . @@@@@@@@@@@@@ o @@@\\ ",
    " .@@@@@ O  `.-./ .     @@@@@@@@@@@@    @@ .",
    " | @@@@   --`-'      o    @@@@@@@@ @@@@   |",
    " |@ @@@       `   o     .  @@  . @@@@@@@  |",
    " |      @@  @        .-.    @@@  @@@@@@@  |",
    " `  . @       @@@    `-'  . @@@@  @@@@  o '",
    "  \\     @@   @@@@@ .         @@  .       / ",
    "   \\   @@@@  @\\@@    /  . O   .    o  . /  ",
    "    \\o  @@     \\ \\  /       .   .      /   ",
    "     \\    .    .\\.-.___  .     .  .-. /    ",
    "      `.         `-'             `-'.'     ",
    "        `-.  o  / |    o   O  .  .-'       ",
    "           `---.    .    .  .---'          ",
    "                `----------'               ",
)

BACKGROUND_22 = (
    "                .------------.               ",
    "            .--'   o     . .  `--.           ",
    "         .-'    .    O   .      . `-.        ",
    "       .'@    @@@@@@@   .  @@@@@     `.      ",
    "     .'@@@  @@@@@@@@@@@   @@@@@@@  .   `.    ",
    "    /     o @@@@@@@@@@@   @@@@@@@      . \\   ",
    "   /@@  o   @@@@@@@@@@@.   @@@@@@@   O    \\  ",
    "  /@@@@   .   @@@@@@@o    @@@@@@@@@@    @@@\\ ",
    "  |@@@@@               . @@@@@@@@@@@@  @@@@| ",
    " /@@@@@  O  `.-./  .      @@@@@@@@@@@   @@  \\",
    " | @@@@    --`-'      o    . @@@@@@@ @@@@   |",
    " |@ @@@  @@  @ `   o  .-.     @@  . @@@@@@  |",
    " \\             @@@    `-'  .   @@@  @@@@@@  /",
    "  | . @  @@   @@@@@ .          @@@@  @@@ o | ",
    "  \\     @@@@  @\\@@    /  .  O   @@ .     . / ",
    "   \\  o  @@     \\ \\  /          . . o     /  ",
    "    \\      .    .\\.-.___   .  .  .  .-.  /   ",
    "     `.           `-'              `-' .'    ",
    "       `.    o   / |     o   O   .   .'      ",
    "         `-.    /     .      .    .-'        ",
    "            `--.        .     .--'           ",
    "                `------------'               ",
)

BACKGROUND_23 = (
    "                 .------------.                ",
    "             .--'  o     . .   `--.            ",
    "          .-'   .    O   .       . `-.         ",
    "       .-'@   @@@@@@@   .  @@@@@      `-.      ",
    "      /@@@  @@@@@@@@@@@   @@@@@@@   .    \\     ",
    "    ./    o @@@@@@@@@@@   @@@@@@@       . \\.   ",
    "   /@@  o   @@@@@@@@@@@.   @@@@@@@   O      \\  ",
    "  /@@@@   .   @@@@@@@o    @@@@@@@@@@     @@@ \\ ",
    "  |@@@@@               . @@@@@@@@@@@@@ o @@@@| ",
    " /@@@@@  O  `.-./  .      @@@@@@@@@@@@    @@  \\",
    " | @@@@    --`-'       o     @@@@@@@@ @@@@    |",
    " |@ @@@        `    o      .  @@   . @@@@@@@  |",
    " |       @@  @         .-.     @@@   @@@@@@@  |",
    " \\  . @        @@@     `-'   . @@@@   @@@@  o /",
    "  |      @@   @@@@@ .           @@   .       | ",
    "  \\     @@@@  @\\@@    /  .  O    .     o   . / ",
    "   \\  o  @@     \\ \\  /         .    .       /  ",
    "    `\\     .    .\\.-.___   .      .   .-. /'   ",
    "      \\           `-'                `-' /     ",
    "       `-.   o   / |     o    O   .   .-'      ",
    "          `-.   /     .       .    .-'         ",
    "             `--.       .      .--'            ",
    "                 `------------'                ",
)

BACKGROUND_24 = (
    "                  .------------.                 ",
    "             .---' o     .  .   `---.            ",
    "          .-'   .    O    .       .  `-.         ",
    "        .'@   @@@@@@@   .   @@@@@       `.       ",
    "      .'@@  @@@@@@@@@@@    @@@@@@@   .    `.     ",
    "     /    o @@@@@@@@@@@    @@@@@@@       .  \\    ",
    "    /@  o   @@@@@@@@@@@.    @@@@@@@   O      \\   ",
    "   /@@@   .   @@@@@@@o     @@@@@@@@@@     @@@ \\  ",
    "  /@@@@@               .  @@@@@@@@@@@@@ o @@@@ \\ ",
    "  |@@@@  O  `.-./  .       @@@@@@@@@@@@    @@  | ",
    " / @@@@    --`-'       o      @@@@@@@@ @@@@     \\",
    " |@ @@@     @  `           .   @@     @@@@@@@   |",
    " |      @           o          @      @@@@@@@   |",
    " \\       @@            .-.      @@@    @@@@  o  /",
    "  | . @        @@@     `-'    . @@@@           | ",
    "  \\      @@   @@@@@ .            @@   .        / ",
    "   \\    @@@@  @\\@@    /  .   O    .     o   . /  ",
    "    \\ o  @@     \\ \\  /          .    .       /   ",
    "     \\     .    .\\.-.___    .      .   .-.  /    ",
    "      `.          `-'                 `-' .'     ",
    "        `.   o   / |      o    O   .    .'       ",
    "          `-.   /      .       .     .-'         ",
    "             `---.       .      .---'            ",
    "                  `------------'                 ",
)

BACKGROUND_29 = (
    "                      .--------------.                     ",
    "                 .---'  o        .    `---.                ",
    "              .-'    .    O  .         .   `-.             ",
    "           .-'     @@@@@@       .             `-.          ",
    "         .'@@   @@@@@@@@@@@       @@@@@@@   .    `.        ",
    "       .'@@@  @@@@@@@@@@@@@@     @@@@@@@@@         `.      ",
    "      /@@@  o @@@@@@@@@@@@@@     @@@@@@@@@     O     \\     ",
    "     /        @@@@@@@@@@@@@@  @   @@@@@@@@@ @@     .  \\    ",
    "    /@  o      @@@@@@@@@@@   .  @@  @@@@@@@@@@@     @@ \\   ",
    "   /@@@      .   @@@@@@ o       @  @@@@@@@@@@@@@ o @@@@ \\  ",
    "  /@@@@@                  @ .      @@@@@@@@@@@@@@  @@@@@ \\ ",
    "  |@@@@@    O    `.-./  .        .  @@@@@@@@@@@@@   @@@  | ",
    " / @@@@@        --`-'       o        @@@@@@@@@@@ @@@    . \\",
    " |@ @@@@ .  @  @    `    @            @@      . @@@@@@    |",
    " |   @@                         o    @@   .     @@@@@@    |",
    " |  .     @   @ @       o              @@   o   @@@@@@.   |",
    " \\     @    @       @       .-.       @@@@       @@@      /",
    "  |  @    @  @              `-'     . @@@@     .    .    | ",
    "  \\ .  o       @  @@@@  .              @@  .           . / ",
    "   \\      @@@    @@@@@@       .                   o     /  ",
    "    \\    @@@@@   @@\\@@    /        O          .        /   ",
    "     \\ o  @@@       \\ \\  /  __        .   .     .--.  /    ",
    "      \\      .     . \\.-.---                   `--'  /     ",
    "       `.             `-'      .                   .'      ",
    "         `.    o     / | `           O     .     .'        ",
    "           `-.      /  |        o             .-'          ",
    "              `-.          .         .     .-'             ",
    "                 `---.        .       .---'                ",
    "                      `--------------'                     ",
)

BACKGROUND_32 = (
    "                         .--------------.                        ",
    "                   .----'  o        .    `----.                  ",
    "                .-'     .    O  .          .   `-.               ",
    "             .-'      @@@@@@       .              `-.            ",
    "           .'@     @@@@@@@@@@@       @@@@@@@@    .   `.          ",
    "         .'@@    @@@@@@@@@@@@@@     @@@@@@@@@@         `.        ",
    "       .'@@@ o   @@@@@@@@@@@@@@     @@@@@@@@@@      o    `.      ",
    "      /@@@       @@@@@@@@@@@@@@  @   @@@@@@@@@@  @@     .  \\     ",
    "     /            @@@@@@@@@@@   .  @@   @@@@@@@@@@@@     @@ \\    ",
    "    /@  o     .     @@@@@@ o       @   @@@@@@@@@@@@@@ o @@@@ \\   ",
    "   /@@@                        .       @@@@@@@@@@@@@@@  @@@@@ \\  ",
    "  /@@@@@                     @      .   @@@@@@@@@@@@@@   @@@   \\ ",
    "  |@@@@@     o      `.-./  .             @@@@@@@@@@@@ @@@    . | ",
    " / @@@@@           __`-'       o          @@       . @@@@@@     \\",
    " |@ @@@@ .        @    `    @            @@    .     @@@@@@     |",
    " |   @@       @                    o       @@@   o   @@@@@@.    |",
    " |          @                             @@@@@       @@@       |",
    " |  . .  @      @  @       o              @@@@@     .    .      |",
    " \\            @                .-.      .  @@@  .           .   /",
    "  |    @   @   @      @        `-'                     .       / ",
    "  \\   .      @   @                   .            o            / ",
    "   \\     o          @@@@   .                .                 /  ",
    "    \\       @@@    @@@@@@        .                    o      /   ",
    "     \\     @@@@@   @@\\@@    /         o           .         /    ",
    "      \\  o  @@@       \\ \\  /  ___         .   .     .--.   /     ",
    "       `.      .       \\.-.---                     `--'  .'      ",
    "         `.             `-'       .                    .'        ",
    "           `.    o     / |              O      .     .'          ",
    "             `-.      /  |         o              .-'            ",
    "                `-.           .         .      .-'               ",
    "                   `----.        .       .----'                  ",
    "                         `--------------'                        ",
)

BACKGROUNDS: Dict[int, Tuple[str, ...]] = {
    18: BACKGROUND_18,
    19: BACKGROUND_19,
    21: BACKGROUND_21,
    22: BACKGROUND_22,
    23: BACKGROUND_23,
    24: BACKGROUND_24,
    29: BACKGROUND_29,
    32: BACKGROUND_32,
}
