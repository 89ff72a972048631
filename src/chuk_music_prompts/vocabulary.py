"""
Static vocabularies.

Keyword sets used to classify style descriptor elements, and the genre
catalogue accepted by the Genre value.
"""

# Genres recognised inside a style descriptor (matched case-insensitively)
STYLE_GENRES: frozenset[str] = frozenset(
    {
        "Pop",
        "Rock",
        "Hip-Hop",
        "R&B",
        "Country",
        "Folk",
        "Blues",
        "Jazz",
        "Classical",
        "Electronic",
        "EDM",
        "House",
        "Techno",
        "Trance",
        "Drum & Bass",
        "Dubstep",
        "Ambient",
        "Chillout",
        "Downtempo",
        "Trip-Hop",
        "Indie",
        "Alternative",
        "Punk",
        "Metal",
        "Hard Rock",
        "Progressive Rock",
        "Psychedelic Rock",
        "Funk",
        "Soul",
        "Disco",
        "Reggae",
        "Ska",
        "Latin",
        "Salsa",
        "Bossa Nova",
        "World Music",
        "Celtic",
        "African",
        "Asian",
        "Middle Eastern",
        "Japanese",
        "J-Pop",
        "J-Rock",
        "Enka",
        "Shibuya-kei",
    }
)

# Any element containing one of these stems counts as a genre ("indie rock", "synth-pop")
GENRE_STEMS: tuple[str, ...] = ("rock", "pop", "jazz", "electronic")

STYLE_INSTRUMENTS: frozenset[str] = frozenset(
    {
        "guitar",
        "electric guitar",
        "acoustic guitar",
        "bass",
        "bass guitar",
        "electric bass",
        "piano",
        "keyboard",
        "synthesizer",
        "synth",
        "drums",
        "percussion",
        "violin",
        "cello",
        "saxophone",
        "trumpet",
        "flute",
        "harmonica",
        "organ",
        "mandolin",
        "banjo",
        "harp",
        "accordion",
        "xylophone",
        "marimba",
        "timpani",
        "tabla",
        "sitar",
        "808 drums",
        "analog synth",
        "digital piano",
        "string section",
        "brass section",
        "woodwinds",
        "choir",
        "vocals",
        "background vocals",
        "lead vocals",
        "harmonies",
    }
)

STYLE_MOODS: frozenset[str] = frozenset(
    {
        "energetic",
        "calm",
        "dark",
        "bright",
        "melancholic",
        "uplifting",
        "aggressive",
        "peaceful",
        "intense",
        "relaxed",
        "mysterious",
        "joyful",
        "sad",
        "angry",
        "romantic",
        "nostalgic",
        "dreamy",
        "atmospheric",
        "driving",
        "flowing",
        "pulsing",
        "groovy",
        "smooth",
        "rough",
        "polished",
        "raw",
        "clean",
        "distorted",
        "warm",
        "cool",
        "explosive",
        "subtle",
        "dramatic",
        "intimate",
        "epic",
        "minimalist",
        "complex",
        "simple",
        "layered",
        "sparse",
        "dense",
        "heavy",
        "light",
        "powerful",
        "gentle",
    }
)

# Full catalogue accepted by Genre.create
SUPPORTED_GENRES: tuple[str, ...] = (
    # Main genres
    "Pop",
    "Rock",
    "Hip-Hop",
    "R&B",
    "Country",
    "Folk",
    "Blues",
    "Jazz",
    "Classical",
    "Electronic",
    "EDM",
    "House",
    "Techno",
    "Trance",
    "Drum & Bass",
    "Dubstep",
    "Ambient",
    "Chillout",
    "Downtempo",
    "Trip-Hop",
    "Indie",
    "Alternative",
    "Punk",
    "Metal",
    "Hard Rock",
    "Progressive Rock",
    "Psychedelic Rock",
    "Funk",
    "Soul",
    "Disco",
    "Reggae",
    "Ska",
    "Latin",
    "Salsa",
    "Bossa Nova",
    "World Music",
    "Celtic",
    "African",
    "Asian",
    "Middle Eastern",
    "Japanese",
    "J-Pop",
    "J-Rock",
    "Enka",
    "Shibuya-kei",
    "Experimental",
    "Avant-garde",
    "Minimalist",
    "Drone",
    "Noise",
    "Soundtrack",
    "Cinematic",
    "Orchestral",
    "Choral",
    "A cappella",
    "Singer-songwriter",
    "Acoustic",
    "Unplugged",
    "Lo-fi",
    "Chillwave",
    "Synthwave",
    "Retrowave",
    "Vaporwave",
    "Future Bass",
    "Trap",
    "Phonk",
    "Drill",
    "Grime",
    "UK Garage",
    "Breakbeat",
    "Jungle",
    "Hardcore",
    "Hardstyle",
    "Gabber",
    "Industrial",
    "EBM",
    "Darkwave",
    "Goth",
    "Post-punk",
    "New Wave",
    "Synthpop",
    "Shoegaze",
    "Dream Pop",
    "Emo",
    "Screamo",
    "Metalcore",
    "Deathcore",
    "Black Metal",
    "Death Metal",
    "Thrash Metal",
    "Power Metal",
    "Doom Metal",
    "Sludge Metal",
    "Stoner Rock",
    "Grunge",
    "Britpop",
    "Madchester",
    "Baggy",
    "Acid House",
    "Big Beat",
    "Breakcore",
    "IDM",
    "Glitch",
    "Microsound",
    "Lowercase",
    "Clicks & Cuts",
    # Regional and cultural
    "K-Pop",
    "Afrobeat",
    "Reggaeton",
    "Flamenco",
    "Fado",
    "Tango",
    "Cumbia",
    "Merengue",
    "Bachata",
    "Mento",
    "Calypso",
    "Soca",
    "Zouk",
    "Compas",
    "Highlife",
    "Makossa",
    "Soukous",
    "Mbaqanga",
    "Kwaito",
    "Amapiano",
    "Gqom",
    "Baile Funk",
    "Axé",
    "Forró",
    "MPB",
    "Tropicália",
    "Pagode",
    "Sertanejo",
    "Mbalax",
    "Coupé-Décalé",
    "Ndombolo",
    "Raï",
    "Chaabi",
    "Gnawa",
    "Klezmer",
    "Qawwali",
    "Bhangra",
    "Filmi",
    "Carnatic",
    "Hindustani",
    "Gamelan",
    "Dangdut",
    "Keroncong",
    "Pansori",
    "Gagaku",
    "Min'yō",
    "Taiko",
    "Jiuta",
    "Kayōkyoku",
    # Modern
    "Hyperpop",
    "Bedroom Pop",
    "Dark Ambient",
    "Witch House",
    "Seapunk",
    "Cloud Rap",
    "Emo Rap",
    "Melodic Dubstep",
    "Colour Bass",
    "Riddim",
    "Deathstep",
    "Brostep",
    "Complextro",
    "Glitch Hop",
    "Neurohop",
    "Liquid Funk",
    "Neurofunk",
    "Hardtek",
    "Frenchcore",
    "UK Hardcore",
    "Happy Hardcore",
    "Speedcore",
    "Terrorcore",
    "Extratone",
    "Splittercore",
    "Digital Hardcore",
    "Cybergrind",
    "Mathcore",
    "Grindcore",
    "Powerviolence",
    "Fastcore",
    "Crust Punk",
    "D-beat",
    "Street Punk",
    "Oi!",
    "Hardcore Punk",
    "Anarcho-punk",
    "Celtic Punk",
    "Folk Punk",
    "Cowpunk",
    "Psychobilly",
    "Gothabilly",
    "Rockabilly",
    "Surf Rock",
    "Garage Rock",
    "Proto-punk",
    "Krautrock",
    "Space Rock",
    "Stoner Metal",
    "Post-rock",
    "Post-metal",
    "Atmospheric Black Metal",
    "Blackgaze",
    "Doomgaze",
    "Sludgecore",
    "Mathrock",
    "Midwest Emo",
    "Emocore",
    "Post-hardcore",
    "Melodic Hardcore",
    "Straight Edge",
    "Youth Crew",
    "Beatdown Hardcore",
    "Crossover Thrash",
    "Groove Metal",
    "Nu Metal",
    "Rap Metal",
    "Funk Metal",
    "Alternative Metal",
    "Post-grunge",
    "Riot Grrrl",
    "Queercore",
    "Sadcore",
    "Slowcore",
    "Emo Pop",
    "Pop Punk",
    "Ska Punk",
    "Two-tone",
    "Third Wave Ska",
)

MAIN_GENRES: tuple[str, ...] = (
    "Pop",
    "Rock",
    "Hip-Hop",
    "R&B",
    "Country",
    "Folk",
    "Blues",
    "Jazz",
    "Classical",
    "Electronic",
    "Indie",
    "Alternative",
    "Metal",
    "Punk",
    "Funk",
    "Soul",
    "Reggae",
    "Latin",
    "World Music",
    "Japanese",
    "African",
    "Asian",
    "K-Pop",
    "Afrobeat",
    "Experimental",
)

SUB_GENRES: dict[str, tuple[str, ...]] = {
    "Electronic": (
        "EDM",
        "House",
        "Techno",
        "Trance",
        "Drum & Bass",
        "Dubstep",
        "Ambient",
        "Chillout",
        "Downtempo",
        "Trip-Hop",
        "Future Bass",
        "Melodic Dubstep",
        "Riddim",
        "Brostep",
        "Glitch Hop",
        "Neurohop",
    ),
    "Rock": (
        "Hard Rock",
        "Progressive Rock",
        "Psychedelic Rock",
        "Grunge",
        "Britpop",
        "Post-rock",
        "Garage Rock",
        "Surf Rock",
        "Krautrock",
        "Space Rock",
    ),
    "Metal": (
        "Black Metal",
        "Death Metal",
        "Thrash Metal",
        "Power Metal",
        "Doom Metal",
        "Sludge Metal",
        "Nu Metal",
        "Groove Metal",
        "Post-metal",
        "Atmospheric Black Metal",
        "Stoner Metal",
    ),
    "Japanese": ("J-Pop", "J-Rock", "Enka", "Shibuya-kei", "Gagaku", "Min'yō", "Taiko", "Kayōkyoku"),
    "Hip-Hop": ("Trap", "Phonk", "Drill", "Grime", "Cloud Rap", "Emo Rap"),
    "Punk": (
        "Post-punk",
        "New Wave",
        "Emo",
        "Screamo",
        "Hardcore Punk",
        "Pop Punk",
        "Folk Punk",
        "Celtic Punk",
    ),
    "K-Pop": ("K-Pop",),
    "Afrobeat": ("Afrobeat", "Highlife", "Amapiano", "Gqom"),
    "Pop": ("Hyperpop", "Bedroom Pop", "Emo Pop", "Synthpop"),
    "Latin": ("Reggaeton", "Cumbia", "Merengue", "Bachata", "Sertanejo", "Baile Funk"),
    "African": ("Afrobeat", "Highlife", "Makossa", "Soukous", "Mbalax", "Amapiano", "Gqom"),
    "Asian": ("K-Pop", "Gamelan", "Dangdut", "Pansori", "Bhangra", "Qawwali"),
    "Experimental": ("Hyperpop", "Witch House", "Seapunk", "Dark Ambient", "Noise", "Drone"),
}
