"""Reference data for wallet normalization and derived visuals.

Fixed palettes and tags used by the derivation functions. The emoji palette is
an ordered contract: changing its membership or order changes every derived
emoji, so append-only edits are not safe either.
"""

# Tag that marks a key-opinion-leader wallet in the GMGN payload.
KOL_TAG = "kol"

# Characters of the address kept when a wallet has no name.
FALLBACK_NAME_LENGTH = 8

# Characters of the address used to seed the pixel avatar.
AVATAR_SEED_LENGTH = 10

AVATAR_GRID_SIZE = 8

# Four-colour themes for avatar pixels: blue, green, red, purple, amber.
AVATAR_PALETTES = (
    ("#4FC1E9", "#5D9CEC", "#7986CB", "#5C6BC0"),
    ("#A0D468", "#8CC152", "#48CFAD", "#37BC9B"),
    ("#FC6E51", "#E9573F", "#ED5565", "#DA4453"),
    ("#AC92EC", "#967ADC", "#D770AD", "#EC87C0"),
    ("#FFCE54", "#F6BB42", "#E8AA14", "#F5AB35"),
)

AVATAR_BACKGROUNDS = ("#34495E", "#2C3E50", "#333333", "#3A539B", "#674172")

# Emoji candidates for Axiom exports, picked by name hash.
EMOJI_PALETTE = (
    # Vehicles
    "🚗", "🚕", "🚙", "🚌", "🚎", "🏎️", "🚓", "🚑", "🚒", "🚚", "🚛", "🚜", "🚲", "🛵", "🏍️", "🛺", "🚨",
    "🚔", "🚍", "🚘", "🚖", "🚡", "🚠", "🚟", "🚃", "🚋", "🚞", "🚝", "🚄", "🚅", "🚈", "🚂", "🚆", "🚊",
    "🚉", "✈️", "🛫", "🛬", "🛩️", "💺", "🛰️", "🚀", "🛸", "🚁", "🛶", "⛵", "🚤", "🛥️", "🛳️", "⛴️", "🚢",

    # Animals
    "🐶", "🐱", "🐭", "🐹", "🐰", "🦊", "🐻", "🐼", "🐻‍❄️", "🐨", "🐯", "🦁", "🐮", "🐷", "🐸", "🐵", "🙈", "🙉",
    "🙊", "🐒", "🦆", "🐔", "🐧", "🐦", "🐤", "🐣", "🐥", "🦅", "🦉", "🦇", "🐺", "🐗", "🐴", "🦄", "🐝", "🪱",
    "🐛", "🦋", "🐌", "🐞", "🐜", "🪰", "🪲", "🪳", "🦟", "🦗", "🕷️", "🕸️", "🦂", "🐢", "🐍", "🦎", "🦖", "🦕",
    "🐙", "🦑", "🦐", "🦞", "🦀", "🐡", "🐠", "🐟", "🐬", "🐳", "🐋", "🦈", "🐊", "🐅", "🐆", "🦓", "🦍", "🦧",
    "🦣", "🐘", "🦛", "🦏", "🐪", "🐫", "🦒", "🦘", "🦬", "🐃", "🐂", "🐄", "🐎", "🐖", "🐏", "🐑", "🦙", "🐐",

    # Food
    "🍏", "🍎", "🍐", "🍊", "🍋", "🍌", "🍉", "🍇", "🍓", "🫐", "🍈", "🍒", "🍑", "🥭", "🍍", "🥥", "🥝", "🍅",
    "🍆", "🥑", "🥦", "🥬", "🥒", "🌶️", "🫑", "🌽", "🥕", "🧄", "🧅", "🥔", "🍠", "🥐", "🥯", "🍞", "🥖", "🥨",
    "🧀", "🥚", "🍳", "🧈", "🥞", "🧇", "🥓", "🥩", "🍗", "🍖", "🦴", "🌭", "🍔", "🍟", "🍕", "🥪", "🥙", "🧆",

    # Objects and sports
    "💎", "🔮", "🎮", "🎯", "🎲", "🎭", "🎨", "🎬", "📷", "🎤", "🎧", "🎺", "🎸", "🪕", "🎻", "🎲", "♟️",
    "🏆", "🏅", "🥇", "🥈", "🥉", "🏀", "🏐", "🏈", "⚾", "🥎", "🎾", "🏉", "🥏", "🎱", "🪀", "🏓", "🏸",
    "🏒", "🏑", "🥍", "🏏", "🪃", "🥊", "🥋", "🪁", "⛳", "🏹", "🎣", "🤿", "🥌", "🛷", "🎿",

    # Faces and hands
    "😀", "😃", "😄", "😁", "😆", "😅", "🤣", "😂", "🙂", "🙃", "😉", "😊", "😇", "🥰", "😍", "🤩", "😘", "😗",
    "😚", "😙", "🥲", "😋", "😛", "😜", "😝", "🤑", "🤗", "🤭", "🤫", "🤔", "🤐", "🤨", "😐", "😑", "😶",
    "👋", "🤚", "🖐️", "✋", "🖖", "👌", "🤌", "🤏", "✌️", "🤞", "🤟", "🤘", "🤙", "👈", "👉", "👆", "👇",

    # Plants and weather
    "🌵", "🎄", "🌲", "🌳", "🌴", "🌱", "🌿", "☘️", "🍀", "🍁", "🍂", "🍃", "🪴", "🪷", "⭐", "🌟", "✨",
    "⚡", "☄️", "💥", "🔥", "🌪️", "🌈", "☀️", "🌤️", "⛅", "🌥️", "☁️", "🌦️", "🌧️", "⛈️", "🌩️", "🌨️",
)
