"""Constants for the recipebox package."""

# Environment variable names (read by the CLI after loading .env)
ENV_FETCH_TIMEOUT = "RECIPEBOX_FETCH_TIMEOUT"
ENV_LOG_LEVEL = "RECIPEBOX_LOG_LEVEL"

# Fetch limits
DEFAULT_TIMEOUT = 30
DEFAULT_MAX_RESPONSE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_REDIRECTS = 5
ALLOWED_CONTENT_TYPES = ("text/html", "application/xhtml", "application/xml")

# Browser profile handed to cloudscraper
BROWSER_SETTINGS = {
    "browser": "chrome",
    "platform": "windows",
    "desktop": True,
}

# Recipe defaults
DEFAULT_SERVINGS = 4
UNTITLED_RECIPE = "Untitled Recipe"
MAX_TITLE_LENGTH = 200

# Markdown import
MIN_NOTES_LENGTH = 20
MIN_BOLD_TITLE_LENGTH = 5
MIN_PLAIN_TITLE_LENGTH = 15

# Grocery list
DEFAULT_CATEGORY = "Other"

GROCERY_CATEGORIES = (
    "Produce",
    "Dairy & Eggs",
    "Meat & Seafood",
    "Bakery",
    "Pantry",
    "Frozen",
    "Canned Goods",
    "Spices & Seasonings",
    "Condiments",
    "Beverages",
    DEFAULT_CATEGORY,
)

# Keyword table for guessing a category, checked in order (first match wins)
CATEGORY_KEYWORDS = (
    ("Produce", (
        "lettuce", "tomato", "onion", "garlic", "carrot", "celery", "pepper",
        "potato", "apple", "banana", "lemon", "lime", "orange", "avocado",
        "spinach", "kale", "broccoli", "cucumber", "mushroom", "ginger",
        "herb", "cilantro", "parsley", "basil", "thyme", "rosemary",
    )),
    ("Dairy & Eggs", (
        "milk", "cream", "butter", "cheese", "yogurt", "egg", "sour cream",
    )),
    ("Meat & Seafood", (
        "chicken", "beef", "pork", "turkey", "salmon", "shrimp", "fish",
        "bacon", "sausage", "ground",
    )),
    ("Bakery", (
        "bread", "tortilla", "bun", "roll", "croissant", "bagel", "pita",
    )),
    ("Pantry", (
        "flour", "sugar", "rice", "pasta", "oil", "vinegar", "sauce", "broth",
        "stock", "honey", "syrup", "oat", "cereal", "nut", "seed",
    )),
    ("Spices & Seasonings", (
        "salt", "pepper", "cumin", "paprika", "oregano", "cinnamon", "nutmeg",
        "cayenne", "chili", "curry",
    )),
    ("Canned Goods", (
        "canned", "beans", "tomato paste", "diced tomato", "coconut milk",
    )),
    ("Frozen", ("frozen",)),
    ("Condiments", (
        "ketchup", "mustard", "mayo", "mayonnaise", "soy sauce", "hot sauce",
        "dressing",
    )),
)
