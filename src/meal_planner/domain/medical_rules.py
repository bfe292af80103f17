"""Threshold and keyword tables for medical conditions."""

MEDICAL_THRESHOLDS: dict[str, dict[str, float | bool]] = {
    "diabetes": {"max_glycemic_index": 55, "max_sugar_g": 5, "min_fiber_g": 3},
    "thyroid": {"max_caffeine_mg": 50, "avoid_goitrogens": True},
    "pcod": {"max_insulin_index": 50, "min_fiber_g": 5, "max_sugar_g": 5},
    "high-cholesterol": {"max_saturated_fat_g": 2, "min_fiber_g": 3},
    "hypertension": {"max_sodium_mg": 140, "max_caffeine_mg": 50},
    "heart-disease": {
        "max_saturated_fat_g": 1.5,
        "max_sodium_mg": 120,
        "min_fiber_g": 3,
    },
    "ibs": {"avoid_fodmap": True},
    "gout": {"max_purine_mg": 50},
    "kidney-stones": {"max_oxalate_mg": 10},
    "migraines": {"avoid_tyramine": True},
}

_CARDIO_AVOID = (
    "butter",
    "ghee",
    "lard",
    "fatty meat",
    "skin",
    "organ meat",
    "full-fat dairy",
    "cheese",
    "cream",
    "ice cream",
    "coconut oil",
    "palm oil",
    "fried food",
    "fast food",
)

FOODS_TO_AVOID: dict[str, tuple[str, ...]] = {
    "diabetes": (
        "sugar",
        "candy",
        "chocolate",
        "soda",
        "juice",
        "white bread",
        "white rice",
        "pastry",
        "cake",
        "cookie",
        "ice cream",
        "honey",
        "maple syrup",
        "jam",
        "jelly",
    ),
    "thyroid": (
        "soy",
        "tofu",
        "soybean",
        "cabbage",
        "broccoli",
        "cauliflower",
        "kale",
        "brussels sprouts",
        "bok choy",
        "turnip",
        "rutabaga",
        "radish",
        "millet",
        "peach",
        "peanut",
        "pine nut",
        "strawberry",
    ),
    "pcod": (
        "white bread",
        "pastry",
        "cake",
        "cookie",
        "soda",
        "juice",
        "candy",
        "processed food",
        "fried food",
        "fast food",
        "white rice",
        "potato chips",
    ),
    "high-cholesterol": _CARDIO_AVOID,
    "hypertension": (
        "salt",
        "soy sauce",
        "pizza",
        "canned soup",
        "processed meat",
        "bacon",
        "ham",
        "salami",
        "sausage",
        "frozen dinner",
        "pickle",
        "ketchup",
        "mustard",
        "salad dressing",
    ),
    "heart-disease": (*_CARDIO_AVOID, "salt"),
    "ibs": (
        "onion",
        "garlic",
        "wheat",
        "rye",
        "barley",
        "apple",
        "pear",
        "watermelon",
        "cauliflower",
        "mushroom",
        "milk",
        "ice cream",
        "yogurt",
        "soft cheese",
        "beans",
        "lentils",
    ),
    "gout": (
        "organ meat",
        "liver",
        "kidney",
        "sweetbread",
        "game meat",
        "sardine",
        "mackerel",
        "anchovy",
        "herring",
        "scallop",
        "beer",
        "liquor",
        "yeast",
    ),
    "kidney-stones": (
        "spinach",
        "rhubarb",
        "beet",
        "swiss chard",
        "chocolate",
        "tea",
        "nuts",
        "peanut",
        "wheat bran",
    ),
    "migraines": (
        "aged cheese",
        "cured meat",
        "smoked fish",
        "yeast extract",
        "soy sauce",
        "miso",
        "teriyaki",
        "alcohol",
        "chocolate",
        "caffeine",
        "msg",
        "artificial sweetener",
    ),
}

FOODS_RECOMMENDED: dict[str, tuple[str, ...]] = {
    "diabetes": (
        "leafy greens",
        "broccoli",
        "cauliflower",
        "cucumber",
        "tomato",
        "bell pepper",
        "zucchini",
        "eggplant",
        "beans",
        "lentils",
        "chickpeas",
        "quinoa",
        "brown rice",
        "oats",
        "fish",
        "chicken",
        "tofu",
        "nuts",
        "olive oil",
        "avocado",
    ),
    "thyroid": (
        "seafood",
        "fish",
        "seaweed",
        "dairy",
        "egg",
        "chicken",
        "nuts",
        "whole grain",
        "fresh fruit",
        "vegetable",
        "brazil nut",
        "yogurt",
    ),
    "pcod": (
        "leafy greens",
        "broccoli",
        "cauliflower",
        "bell pepper",
        "beans",
        "lentils",
        "chickpeas",
        "quinoa",
        "brown rice",
        "oats",
        "fish",
        "tofu",
        "nuts",
        "olive oil",
        "cinnamon",
        "turmeric",
    ),
    "high-cholesterol": (
        "oats",
        "barley",
        "beans",
        "lentils",
        "eggplant",
        "okra",
        "nuts",
        "soy",
        "fatty fish",
        "salmon",
        "fruit",
        "vegetable",
        "olive oil",
        "avocado",
    ),
    "hypertension": (
        "banana",
        "orange",
        "spinach",
        "kale",
        "potato",
        "sweet potato",
        "beans",
        "lentils",
        "fish",
        "chicken",
        "yogurt",
        "oats",
        "garlic",
        "olive oil",
    ),
    "heart-disease": (
        "salmon",
        "tuna",
        "mackerel",
        "sardine",
        "nuts",
        "seeds",
        "olive oil",
        "avocado",
        "oats",
        "barley",
        "brown rice",
        "quinoa",
        "beans",
        "lentils",
        "berries",
        "leafy greens",
    ),
    "ibs": (
        "rice",
        "potato",
        "carrot",
        "cucumber",
        "lettuce",
        "zucchini",
        "bell pepper",
        "egg",
        "chicken",
        "fish",
        "lactose-free dairy",
        "hard cheese",
        "oats",
        "quinoa",
    ),
    "gout": (
        "fruit",
        "vegetable",
        "whole grain",
        "legume",
        "low-fat dairy",
        "egg",
        "chicken",
        "plant oil",
        "nuts",
        "cherry",
        "coffee",
        "water",
    ),
    "kidney-stones": (
        "water",
        "lemon juice",
        "lime juice",
        "orange",
        "melon",
        "banana",
        "cucumber",
        "cauliflower",
        "cabbage",
        "peas",
        "chicken",
        "egg",
        "white fish",
    ),
    "migraines": (
        "fresh fruit",
        "fresh vegetable",
        "fresh meat",
        "fresh fish",
        "rice",
        "oats",
        "quinoa",
        "egg",
        "milk",
        "water",
        "ginger",
        "turmeric",
    ),
}
