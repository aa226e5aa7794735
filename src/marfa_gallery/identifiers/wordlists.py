"""Word lists for two-word art piece identifiers.

Identifiers take the form ``<adjective>-<noun>``. Entries must never contain
the ``-`` separator and must be unique within their list, otherwise
validation and capacity accounting break. Changing a list changes the
identifier space but never invalidates identifiers already issued from
words that remain.
"""

ADJECTIVES: tuple[str, ...] = (
    # Art & Aesthetic
    "abstract",
    "ancient",
    "angular",
    "azure",
    "baroque",
    "blazing",
    "bold",
    "brilliant",
    "carved",
    "celestial",
    "chromatic",
    "classical",
    "cosmic",
    "crystalline",
    "curved",
    # Desert & Landscape
    "barren",
    "bleached",
    "desert",
    "dry",
    "dusty",
    "endless",
    "eroded",
    "faded",
    "golden",
    "harsh",
    "heated",
    "infinite",
    "jagged",
    "luminous",
    "parched",
    "raw",
    "rugged",
    "sandy",
    "scorched",
    "stark",
    "sunbaked",
    "weathered",
    "windcarved",
    # Simulation & Technology
    "artificial",
    "binary",
    "coded",
    "digital",
    "electric",
    "electronic",
    "false",
    "fractal",
    "generated",
    "holographic",
    "hyperreal",
    "matrix",
    "networked",
    "pixelated",
    "programmed",
    "rendered",
    "simulated",
    "synthetic",
    "temporal",
    "virtual",
    # Organic & Anatomical
    "anatomical",
    "biological",
    "calcium",
    "cartilage",
    "cellular",
    "fibrous",
    "hollow",
    "jointed",
    "marrow",
    "mineral",
    "organic",
    "ossified",
    "skeletal",
    "spinal",
    "vital",
    # Mystical & Cinematic
    "cinematic",
    "dreamy",
    "ethereal",
    "floating",
    "ghostly",
    "glowing",
    "haunted",
    "hidden",
    "hypnotic",
    "invisible",
    "levitating",
    "luminescent",
    "magical",
    "mysterious",
    "mystical",
    "phantom",
    "radiant",
    "sacred",
    "secret",
    "shadowy",
    "shimmering",
    "silent",
    "spectral",
    "surreal",
    "transcendent",
    "translucent",
    "twisted",
)


NOUNS: tuple[str, ...] = (
    # Core Project Words
    "marfa",
    "texas",
    "bones",
    "simulation",
    "okeeffe",
    "deer",
    "leg",
    "hip",
    "skull",
    "sky",
    "cloud",
    "blue",
    "intelligence",
    "springbok",
    "trees",
    "matrix",
    "beaver",
    "pig",
    "cow",
    "bull",
    "steer",
    # Bone Names & Anatomy
    "atlas",
    "axis",
    "cervix",
    "clavicle",
    "coccyx",
    "femur",
    "fibula",
    "humerus",
    "mandible",
    "maxilla",
    "metacarpal",
    "metatarsal",
    "patella",
    "pelvis",
    "phalanx",
    "radius",
    "rib",
    "sacrum",
    "scapula",
    "sternum",
    "talus",
    "tibia",
    "ulna",
    "vertebra",
    # Animals (O'Keeffe & Southwest)
    "antelope",
    "armadillo",
    "bobcat",
    "buffalo",
    "coyote",
    "elk",
    "hawk",
    "horse",
    "jackrabbit",
    "javelina",
    "lizard",
    "longhorn",
    "mustang",
    "owl",
    "prairiedog",
    "pronghorn",
    "quail",
    "rabbit",
    "ram",
    "rattlesnake",
    "roadrunner",
    "sheep",
    "turtle",
    # Landscape & Geography
    "adobe",
    "arroyo",
    "badlands",
    "bluff",
    "butte",
    "canyon",
    "cave",
    "cliff",
    "creek",
    "dune",
    "gorge",
    "gulch",
    "mesa",
    "mound",
    "peak",
    "plain",
    "plateau",
    "prairie",
    "ravine",
    "ridge",
    "river",
    "rock",
    "sand",
    "stone",
    "valley",
    "wash",
    # Technology & Simulation
    "algorithm",
    "avatar",
    "binary",
    "circuit",
    "code",
    "cursor",
    "data",
    "file",
    "firewall",
    "firmware",
    "gateway",
    "grid",
    "interface",
    "kernel",
    "network",
    "node",
    "pixel",
    "portal",
    "program",
    "protocol",
    "server",
    "signal",
    "system",
    # Art & Cinema
    "brush",
    "canvas",
    "cinema",
    "color",
    "composition",
    "dawn",
    "dusk",
    "easel",
    "film",
    "frame",
    "gallery",
    "image",
    "lens",
    "light",
    "medium",
    "monolith",
    "museum",
    "narrative",
    "painting",
    "palette",
    "perspective",
    "pigment",
    "prism",
    "projection",
    "scene",
    "screen",
    "sculpture",
    "studio",
    "texture",
    "vision",
    # Abstract Concepts
    "abyss",
    "artifact",
    "chamber",
    "chimera",
    "echo",
    "essence",
    "fragment",
    "ghost",
    "glimpse",
    "horizon",
    "icon",
    "illusion",
    "infinity",
    "legend",
    "memory",
    "metaphor",
    "mirage",
    "moment",
    "monument",
    "myth",
    "origin",
    "phantom",
    "reality",
    "relic",
    "replica",
    "ritual",
    "shadow",
    "spirit",
    "symbol",
    "threshold",
    "truth",
    "void",
    "baudrillard",
)
