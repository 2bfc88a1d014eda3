"""
Static character tables shared by the codecs.

All tables are read-only views; inverse maps are built once at import.
"""

from types import MappingProxyType

# ==========================================
#  MORSE
# ==========================================

MORSE_TABLE = MappingProxyType({
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".",
    "F": "..-.", "G": "--.", "H": "....", "I": "..", "J": ".---",
    "K": "-.-", "L": ".-..", "M": "--", "N": "-.", "O": "---",
    "P": ".--.", "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
    "U": "..-", "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--",
    "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    # A space becomes a blank token so words end up separated by extra spaces
    " ": " ",
})

MORSE_REVERSE = MappingProxyType({code: char for char, code in MORSE_TABLE.items() if char != " "})

# ==========================================
#  SUBSTITUTION TABLES
# ==========================================

LEETSPEAK_TABLE = MappingProxyType({
    "A": "4", "B": "8", "E": "3", "G": "9", "I": "1",
    "O": "0", "S": "5", "T": "7", "Z": "2",
    "a": "4", "b": "8", "e": "3", "g": "9", "i": "1",
    "o": "0", "s": "5", "t": "7", "z": "2",
})

_BRAILLE_LETTERS = {
    "A": "⠁", "B": "⠃", "C": "⠉", "D": "⠙", "E": "⠑",
    "F": "⠋", "G": "⠛", "H": "⠓", "I": "⠊", "J": "⠚",
    "K": "⠅", "L": "⠇", "M": "⠍", "N": "⠝", "O": "⠕",
    "P": "⠏", "Q": "⠟", "R": "⠗", "S": "⠎", "T": "⠞",
    "U": "⠥", "V": "⠧", "W": "⠺", "X": "⠭", "Y": "⠽",
    "Z": "⠵",
}

BRAILLE_TABLE = MappingProxyType({
    **_BRAILLE_LETTERS,
    **{letter.lower(): glyph for letter, glyph in _BRAILLE_LETTERS.items()},
    " ": " ",
})

NATO_TABLE = MappingProxyType({
    "A": "Alfa", "B": "Bravo", "C": "Charlie", "D": "Delta", "E": "Echo",
    "F": "Foxtrot", "G": "Golf", "H": "Hotel", "I": "India", "J": "Juliett",
    "K": "Kilo", "L": "Lima", "M": "Mike", "N": "November", "O": "Oscar",
    "P": "Papa", "Q": "Quebec", "R": "Romeo", "S": "Sierra", "T": "Tango",
    "U": "Uniform", "V": "Victor", "W": "Whiskey", "X": "X-ray", "Y": "Yankee",
    "Z": "Zulu",
    "0": "Zero", "1": "One", "2": "Two", "3": "Three", "4": "Four",
    "5": "Five", "6": "Six", "7": "Seven", "8": "Eight", "9": "Nine",
    " ": "(space)",
})

EMOJI_TABLE = MappingProxyType({
    "A": "🍎", "B": "🐝", "C": "🌜", "D": "🐬", "E": "🥚",
    "F": "🔥", "G": "🍇", "H": "🏠", "I": "🍦", "J": "🕹️",
    "K": "🔑", "L": "🍋", "M": "🌙", "N": "🥜", "O": "🍊",
    "P": "🐧", "Q": "👑", "R": "🌈", "S": "⭐", "T": "🌴",
    "U": "☂️", "V": "🎻", "W": "🌊", "X": "❌", "Y": "🪀",
    "Z": "⚡",
    "0": "0️⃣", "1": "1️⃣", "2": "2️⃣", "3": "3️⃣", "4": "4️⃣",
    "5": "5️⃣", "6": "6️⃣", "7": "7️⃣", "8": "8️⃣", "9": "9️⃣",
    "!": "❗", "?": "❓", ".": "⏺️", ",": "〰️",
})

# ==========================================
#  HTML ENTITIES
# ==========================================

HTML_ENTITIES = MappingProxyType({
    "<": "&lt;", ">": "&gt;", "&": "&amp;", '"': "&quot;", "'": "&apos;",
    "¢": "&cent;", "£": "&pound;", "¥": "&yen;", "€": "&euro;",
    "©": "&copy;", "®": "&reg;",
})

HTML_ENTITIES_REVERSE = MappingProxyType({entity: char for char, entity in HTML_ENTITIES.items()})

# ==========================================
#  ASCII ART (A-E only)
# ==========================================

ASCII_ART_GLYPHS = MappingProxyType({
    "A": "    /\\    \n   /  \\   \n  /    \\  \n /      \\ \n/        \\",
    "B": "|----- \n|     )\n|-----<\n|     )\n|-----'",
    "C": "  _____ \n /      \n|       \n \\      \n  -----'",
    "D": "|\\    \n| )   \n|  )  \n| )   \n|/    ",
    "E": "|-----\n|     \n|---- \n|     \n|-----",
})

# Characters left untouched by URL encoding (RFC 3986 query component)
URL_QUERY_SAFE = "-._~!$&'()*+,;=:@/?"
