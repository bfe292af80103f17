"""Keyword tables for diet preferences."""

_MEATS = (
    "beef",
    "pork",
    "lamb",
    "chicken",
    "turkey",
    "duck",
    "goose",
    "quail",
    "venison",
    "bison",
    "rabbit",
)
_SEAFOOD = (
    "salmon",
    "tuna",
    "cod",
    "tilapia",
    "shrimp",
    "crab",
    "lobster",
    "oyster",
    "clam",
    "mussel",
    "scallop",
)
_PALEO_FOODS = (
    "meat",
    "fish",
    "egg",
    "vegetable",
    "fruit",
    "nut",
    "seed",
    "healthy oil",
    "grass-fed beef",
    "free-range chicken",
    "wild-caught fish",
    "pasture-raised pork",
    "lamb",
    "venison",
    "bison",
    "turkey",
    "duck",
    "salmon",
    "tuna",
    "mackerel",
    "sardine",
    "leafy green",
    "cruciferous vegetable",
    "root vegetable",
    "berry",
    "apple",
    "pear",
    "citrus",
    "melon",
    "almond",
    "walnut",
    "macadamia",
    "pecan",
    "hazelnut",
    "pine nut",
    "olive oil",
    "coconut oil",
    "avocado oil",
    "ghee",
)

INDIAN_LEANING_PREFERENCES = frozenset(
    {
        "indian-vegetarian",
        "hindu-fasting",
        "jain-diet",
        "sattvic-diet",
        "indian-regional",
    }
)

DIET_ALLOWED_FOODS: dict[str, tuple[str, ...]] = {
    "vegetarian": (
        "vegetable",
        "fruit",
        "grain",
        "legume",
        "nut",
        "seed",
        "dairy",
        "egg",
        "honey",
        "tofu",
        "tempeh",
        "seitan",
        "milk",
        "cheese",
        "yogurt",
        "butter",
        "paneer",
        "ghee",
        "whey",
        "casein",
    ),
    "vegan": (
        "vegetable",
        "fruit",
        "grain",
        "legume",
        "nut",
        "seed",
        "tofu",
        "tempeh",
        "seitan",
        "plant milk",
        "nutritional yeast",
        "vegan cheese",
        "plant-based",
        "soy",
        "almond milk",
        "oat milk",
        "coconut milk",
        "rice milk",
        "hemp milk",
        "cashew milk",
        "pea protein",
        "algae",
        "spirulina",
    ),
    "indian-vegetarian": (
        "vegetable",
        "fruit",
        "grain",
        "legume",
        "nut",
        "seed",
        "dairy",
        "honey",
        "paneer",
        "ghee",
        "milk",
        "curd",
        "butter",
        "rice",
        "wheat",
        "dal",
        "chapati",
        "roti",
        "paratha",
        "dosa",
        "idli",
        "upma",
        "poha",
        "khichdi",
        "sabzi",
        "curry",
        "chutney",
        "raita",
        "lassi",
        "buttermilk",
        "kheer",
        "halwa",
        "ladoo",
        "barfi",
        "jalebi",
    ),
    "non-veg": (
        "vegetable",
        "fruit",
        "grain",
        "legume",
        "nut",
        "seed",
        "dairy",
        "egg",
        "honey",
        "meat",
        "poultry",
        "fish",
        "seafood",
        *_MEATS,
        *_SEAFOOD,
    ),
    "eggetarian": (
        "vegetable",
        "fruit",
        "grain",
        "legume",
        "nut",
        "seed",
        "dairy",
        "egg",
        "honey",
        "milk",
        "cheese",
        "yogurt",
        "butter",
        "paneer",
        "ghee",
        "whey",
        "casein",
    ),
    "gluten-free": (
        "vegetable",
        "fruit",
        "rice",
        "corn",
        "potato",
        "quinoa",
        "millet",
        "buckwheat",
        "amaranth",
        "teff",
        "sorghum",
        "tapioca",
        "arrowroot",
        "meat",
        "poultry",
        "fish",
        "seafood",
        "egg",
        "dairy",
        "nut",
        "seed",
        "legume",
        "bean",
        "gluten-free",
    ),
    "intermittent-fasting": (
        "vegetable",
        "fruit",
        "grain",
        "legume",
        "nut",
        "seed",
        "dairy",
        "egg",
        "meat",
        "poultry",
        "fish",
        "seafood",
        "water",
        "tea",
        "coffee",
        "bone broth",
    ),
    "hindu-fasting": (
        "fruit",
        "milk",
        "yogurt",
        "potato",
        "sweet potato",
        "water chestnut",
        "buckwheat",
        "amaranth",
        "rock salt",
        "ginger",
        "cumin",
        "green vegetable",
        "sabudana",
        "rajgira",
        "singhara",
        "kuttu",
        "makhana",
        "sendha namak",
        "coconut",
        "dry fruit",
        "nut",
        "ghee",
    ),
    "jain-diet": (
        "grain",
        "legume",
        "dairy",
        "fruit",
        "above-ground vegetable",
        "nut",
        "seed",
        "milk",
        "curd",
        "ghee",
        "butter",
        "paneer",
        "cheese",
        "wheat",
        "rice",
        "dal",
        "moong",
        "chana",
        "toor",
        "urad",
        "masoor",
        "apple",
        "banana",
        "orange",
        "grape",
        "mango",
        "papaya",
        "pear",
        "almond",
        "cashew",
        "walnut",
        "pista",
    ),
    "sattvic-diet": (
        "fruit",
        "vegetable",
        "whole grain",
        "legume",
        "nut",
        "seed",
        "milk",
        "ghee",
        "honey",
        "jaggery",
        "herb",
        "spice",
        "rice",
        "wheat",
        "barley",
        "oats",
        "moong dal",
        "chana dal",
        "toor dal",
        "urad dal",
        "masoor dal",
        "apple",
        "banana",
        "mango",
        "papaya",
        "almond",
        "cashew",
        "coconut",
        "ginger",
        "turmeric",
        "cinnamon",
        "cardamom",
        "cumin",
        "coriander",
    ),
    "keto": (
        "meat",
        "fish",
        "egg",
        "high-fat dairy",
        "above-ground vegetable",
        "nut",
        "seed",
        "avocado",
        "olive oil",
        "coconut oil",
        "butter",
        "ghee",
        "cream",
        "cheese",
        "bacon",
        "spinach",
        "kale",
        "broccoli",
        "cauliflower",
        "zucchini",
        "asparagus",
        "bell pepper",
        "cucumber",
        "celery",
        "mushroom",
        "almond",
        "walnut",
        "macadamia",
        "pecan",
        "flaxseed",
        "chia seed",
        "mct oil",
    ),
    "paleo": (*_PALEO_FOODS, "honey", "maple syrup"),
    "whole30": _PALEO_FOODS,
    "mediterranean": (
        "vegetable",
        "fruit",
        "whole grain",
        "legume",
        "nut",
        "seed",
        "olive oil",
        "fish",
        "seafood",
        "poultry",
        "egg",
        "dairy",
        "herb",
        "leafy green",
        "tomato",
        "cucumber",
        "eggplant",
        "zucchini",
        "olive",
        "citrus",
        "grape",
        "fig",
        "date",
        "pomegranate",
        "wheat",
        "barley",
        "oats",
        "rice",
        "chickpea",
        "lentil",
        "bean",
        "salmon",
        "sardine",
        "mackerel",
        "tuna",
        "shrimp",
        "chicken",
        "turkey",
        "yogurt",
        "cheese",
        "feta",
        "halloumi",
    ),
    "dash": (
        "vegetable",
        "fruit",
        "whole grain",
        "lean protein",
        "low-fat dairy",
        "nut",
        "seed",
        "legume",
        "healthy oil",
    ),
    "mind": (
        "green leafy vegetable",
        "other vegetable",
        "nut",
        "berry",
        "bean",
        "whole grain",
        "fish",
        "poultry",
        "olive oil",
    ),
    "low-fodmap": (
        "meat",
        "fish",
        "egg",
        "lactose-free dairy",
        "rice",
        "oats",
        "quinoa",
        "potato",
        "carrot",
        "spinach",
    ),
}

BLOOD_TYPE_ALLOWED_FOODS: dict[str, tuple[str, ...]] = {
    "A": (
        "vegetable",
        "fruit",
        "tofu",
        "legume",
        "grain",
        "seafood",
        "turkey",
        "chicken",
        "olive oil",
        "soy",
        "pineapple",
        "garlic",
        "onion",
        "broccoli",
        "spinach",
        "rice",
        "oats",
    ),
    "B": (
        "meat",
        "dairy",
        "vegetable",
        "fruit",
        "grain",
        "seafood",
        "egg",
        "turkey",
        "lamb",
        "rabbit",
        "yogurt",
        "milk",
        "cheese",
        "olive oil",
        "rice",
        "oats",
        "banana",
        "grape",
    ),
    "AB": (
        "seafood",
        "tofu",
        "dairy",
        "vegetable",
        "fruit",
        "grain",
        "turkey",
        "lamb",
        "egg",
        "yogurt",
        "milk",
        "olive oil",
        "rice",
        "oats",
        "banana",
        "grape",
        "pineapple",
    ),
    "O": (
        "meat",
        "fish",
        "vegetable",
        "fruit",
        "egg",
        "seafood",
        "beef",
        "lamb",
        "turkey",
        "cod",
        "salmon",
        "spinach",
        "broccoli",
        "olive oil",
        "walnut",
        "pumpkin seed",
        "plum",
        "fig",
        "pineapple",
    ),
}

REGIONAL_ALLOWED_FOODS: dict[str, tuple[str, ...]] = {
    "north": (
        "wheat",
        "dairy",
        "vegetable",
        "legume",
        "paneer",
        "chicken",
        "lamb",
        "roti",
        "paratha",
        "naan",
        "butter",
        "ghee",
        "rajma",
        "chole",
        "dal makhani",
        "aloo",
        "gobi",
        "matar",
        "palak",
        "kebab",
        "biryani",
        "pulao",
        "lassi",
        "raita",
        "chaat",
        "samosa",
        "pakora",
        "jalebi",
        "gulab jamun",
        "barfi",
        "ladoo",
    ),
    "south": (
        "rice",
        "coconut",
        "vegetable",
        "legume",
        "seafood",
        "yogurt",
        "idli",
        "dosa",
        "vada",
        "uttapam",
        "appam",
        "sambhar",
        "rasam",
        "chutney",
        "fish curry",
        "prawn curry",
        "chicken curry",
        "egg curry",
        "avial",
        "poriyal",
        "kootu",
        "payasam",
        "kesari",
        "mysore pak",
    ),
    "east": (
        "rice",
        "fish",
        "vegetable",
        "mustard",
        "panch phoron",
        "machher jhol",
        "shorshe ilish",
        "chingri malai curry",
        "aloo posto",
        "begun bhaja",
        "cholar dal",
        "luchi",
        "kosha mangsho",
        "mishti doi",
        "rasgulla",
        "sandesh",
        "malpua",
    ),
    "west": (
        "wheat",
        "rice",
        "legume",
        "vegetable",
        "dairy",
        "jaggery",
        "thepla",
        "dhokla",
        "khandvi",
        "fafda",
        "pav bhaji",
        "vada pav",
        "misal pav",
        "puran poli",
        "modak",
        "shrikhand",
        "basundi",
        "dal dhokli",
        "undhiyu",
        "batata vada",
        "sabudana khichdi",
        "poha",
        "thalipeeth",
    ),
    "central": (
        "wheat",
        "corn",
        "legume",
        "vegetable",
        "dairy",
        "bafla",
        "dal bati",
        "poha",
        "jalebi",
        "imarti",
        "khichdi",
        "kadhi",
        "gatte ki sabzi",
        "ker sangri",
        "laal maas",
        "bhutta",
        "makki ki roti",
        "sarson ka saag",
    ),
}

DIET_AVOID_FOODS: dict[str, tuple[str, ...]] = {
    "vegetarian": (
        "meat",
        "poultry",
        "fish",
        "seafood",
        "gelatin",
        "lard",
        "animal rennet",
        "animal stock",
        "animal fat",
        *_MEATS,
        *_SEAFOOD,
        "anchovy",
        "fish sauce",
        "worcestershire sauce",
    ),
    "vegan": (
        "meat",
        "poultry",
        "fish",
        "seafood",
        "dairy",
        "egg",
        "honey",
        "gelatin",
        "lard",
        "animal rennet",
        "whey",
        "casein",
        "lactose",
        "milk",
        "cheese",
        "butter",
        "cream",
        "yogurt",
        "ice cream",
        "mayonnaise",
        "ghee",
        "paneer",
        *_MEATS,
        *_SEAFOOD,
    ),
    "indian-vegetarian": (
        "meat",
        "poultry",
        "fish",
        "seafood",
        "egg",
        "gelatin",
        "animal rennet",
        *_MEATS,
        *_SEAFOOD,
    ),
    "eggetarian": (
        "meat",
        "poultry",
        "fish",
        "seafood",
        "gelatin",
        "lard",
        "animal rennet",
        "animal stock",
        "animal fat",
        *_MEATS,
        *_SEAFOOD,
    ),
    "gluten-free": (
        "wheat",
        "barley",
        "rye",
        "triticale",
        "spelt",
        "kamut",
        "semolina",
        "durum",
        "farina",
        "graham",
        "bulgur",
        "couscous",
        "seitan",
        "malt",
        "bread",
        "pasta",
        "cereal",
        "cracker",
        "cookie",
        "cake",
        "pie",
        "pastry",
        "beer",
        "soy sauce",
        "teriyaki sauce",
        "hoisin sauce",
        "miso",
    ),
    "intermittent-fasting": (
        "sugar",
        "syrup",
        "juice",
        "soda",
        "alcohol",
        "protein shake",
        "smoothie",
    ),
    "hindu-fasting": (
        "grain",
        "rice",
        "wheat",
        "millet",
        "corn",
        "onion",
        "garlic",
        "meat",
        "egg",
        "lentil",
        "common salt",
        "alcohol",
        "mustard oil",
        "sesame oil",
        "refined oil",
        "bread",
        "pasta",
        "noodle",
        "cereal",
        "maida",
        "besan",
        "dal",
    ),
    "jain-diet": (
        "meat",
        "egg",
        "honey",
        "root vegetable",
        "onion",
        "garlic",
        "potato",
        "carrot",
        "beetroot",
        "radish",
        "turmeric",
        "ginger",
        "fermented",
        "alcohol",
        "mushroom",
        "eggplant",
        "brinjal",
        "sprouted",
    ),
    "sattvic-diet": (
        "meat",
        "egg",
        "fish",
        "onion",
        "garlic",
        "mushroom",
        "alcohol",
        "processed food",
        "fried",
        "spicy",
        "fermented",
        "canned",
        "frozen",
        "fast food",
        "junk food",
        "refined sugar",
        "white flour",
        "artificial",
        "preservative",
        "caffeine",
        "chocolate",
        "vinegar",
    ),
    "keto": (
        "sugar",
        "grain",
        "legume",
        "tuber",
        "root vegetable",
        "low-fat dairy",
        "sweetener",
        "bread",
        "pasta",
        "rice",
        "cereal",
        "oatmeal",
        "corn",
        "potato",
        "bean",
        "lentil",
        "chickpea",
        "banana",
        "apple",
        "orange",
        "grape",
        "mango",
        "pineapple",
        "watermelon",
        "honey",
        "maple syrup",
        "jam",
        "jelly",
        "candy",
        "cake",
        "cookie",
        "ice cream",
        "soda",
        "juice",
        "skim milk",
    ),
    "paleo": (
        "grain",
        "legume",
        "dairy",
        "refined sugar",
        "processed food",
        "wheat",
        "corn",
        "rice",
        "oat",
        "barley",
        "rye",
        "quinoa",
        "bean",
        "lentil",
        "peanut",
        "soybean",
        "chickpea",
        "milk",
        "cheese",
        "yogurt",
        "cream",
        "candy",
        "chocolate",
        "cake",
        "cookie",
        "bread",
        "pasta",
        "cereal",
        "cracker",
        "chip",
        "margarine",
    ),
    "whole30": (
        "sugar",
        "alcohol",
        "grain",
        "legume",
        "dairy",
        "processed food",
        "dessert",
        "sweetener",
        "honey",
        "maple syrup",
        "agave",
        "wine",
        "beer",
        "wheat",
        "corn",
        "rice",
        "oat",
        "barley",
        "quinoa",
        "bean",
        "lentil",
        "peanut",
        "chickpea",
        "milk",
        "cheese",
        "yogurt",
        "butter",
        "cream",
        "bread",
        "pasta",
        "cereal",
        "candy",
        "chocolate",
        "cake",
        "cookie",
    ),
    "low-fodmap": (
        "onion",
        "garlic",
        "wheat",
        "rye",
        "barley",
        "honey",
        "apple",
        "pear",
        "watermelon",
        "mango",
        "cauliflower",
        "mushroom",
        "bean",
        "lentil",
        "chickpea",
        "milk",
        "ice cream",
        "soft cheese",
        "yogurt",
        "custard",
    ),
}

HINDU_FASTING_FOODS = (
    "fruit",
    "milk",
    "yogurt",
    "potato",
    "sabudana",
    "makhana",
    "kuttu",
    "singhara",
    "rajgira",
    "nut",
    "coconut",
)

DIET_MACRO_RATIOS: dict[str, tuple[float, float, float]] = {
    "keto": (0.20, 0.05, 0.75),
    "paleo": (0.30, 0.40, 0.30),
    "vegan": (0.20, 0.55, 0.25),
    "vegetarian": (0.20, 0.55, 0.25),
    "indian-vegetarian": (0.20, 0.55, 0.25),
    "mediterranean": (0.20, 0.50, 0.30),
}
DEFAULT_MACRO_RATIOS = (0.25, 0.50, 0.25)
