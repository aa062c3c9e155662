"""
Pytest configuration and shared fixtures.

Page and chat-export fixtures are plain strings so tests never touch the network.
"""

import json

import pytest


LEMON_CAKE_NODE = {
    "@type": ["Recipe", "NewsArticle"],
    "name": "Lemon Cake",
    "image": [{"@type": "ImageObject", "url": "https://example.com/cake.jpg"}],
    "recipeYield": ["8 slices"],
    "prepTime": "PT20M",
    "cookTime": "PT1H",
    "recipeIngredient": ["2 cups flour, sifted", "3 eggs", "1 lemon (zested)"],
    "recipeInstructions": [
        {
            "@type": "HowToSection",
            "name": "Cake",
            "itemListElement": [
                {"@type": "HowToStep", "text": "Mix."},
                {"@type": "HowToStep", "text": "Bake."},
            ],
        },
        {"@type": "HowToStep", "text": "Cool."},
    ],
}


def ld_page(*payloads):
    """Wrap JSON-LD payloads (dicts or raw strings) in a minimal HTML page."""
    scripts = []
    for payload in payloads:
        text = payload if isinstance(payload, str) else json.dumps(payload)
        scripts.append(f'<script type="application/ld+json">{text}</script>')
    return f"<html><head>{''.join(scripts)}</head><body><h1>Ignored</h1></body></html>"


@pytest.fixture
def make_ld_page():
    return ld_page


@pytest.fixture
def jsonld_page():
    """Recipe page whose Recipe sits inside an @graph next to other nodes."""
    return ld_page({
        "@context": "https://schema.org",
        "@graph": [
            {"@type": "WebSite", "name": "Example Kitchen"},
            LEMON_CAKE_NODE,
        ],
    })


@pytest.fixture
def fallback_page():
    """Recipe page without structured data."""
    return """
    <html>
      <head>
        <title>Tomato Soup | Example Kitchen</title>
        <meta property="og:image" content="https://example.com/soup.jpg">
      </head>
      <body>
        <h1 class="recipe-title">Tomato Soup</h1>
        <div class="recipe-ingredients">
          <ul>
            <li>2 cans tomatoes</li>
            <li>1 onion, diced</li>
            <li>   </li>
          </ul>
        </div>
        <div class="recipe-instructions">
          <ol>
            <li>Chop the onion.</li>
            <li>Simmer everything for 20 minutes.</li>
          </ol>
        </div>
      </body>
    </html>
    """


@pytest.fixture
def grok_markdown():
    """A chat answer with an intro, bold title, subheading and labelled steps."""
    return "\n".join([
        "Here is a great one from the **Kitchen Channel** you might like.",
        "**Classic Banana Bread**",
        "A moist, tender loaf that uses up overripe bananas.",
        "",
        "Serves 6-8",
        "Prep time: 15 minutes | Bake time ~50-55 minutes",
        "Watch it here: https://www.youtube.com/watch?v=abc123).",
        "",
        "### Ingredients",
        "- 2 cups all-purpose flour",
        "- 1 tsp salt (well sifted)",
        "- ½ cup **melted** butter",
        "- pinch nutmeg",
        "**For the topping:**",
        "",
        "### Instructions",
        "1. **Prep:** Heat the oven to 350F.",
        "2. Mix the wet ingredients.",
        "   Fold in the flour gently.",
        "3. Bake until golden.",
    ])


@pytest.fixture
def plain_markdown():
    """A chat answer with a plain-text title and a tips section."""
    return "\n".join([
        "Easy Weeknight Chicken Stir Fry",
        "Ingredients",
        "- 1 lb chicken breast",
        "- 2 tbsp soy sauce",
        "Steps",
        "1. Slice the chicken.",
        "2. Stir fry everything.",
        "Tips",
        "Use a very hot wok for the best sear on the chicken.",
    ])


@pytest.fixture
def selections():
    """Two recipes as they arrive from JSON, one of them doubled."""
    return [
        {
            "title": "Pancakes",
            "multiplier": 2,
            "ingredients": [
                {"amount": "2", "unit": "cups", "name": "Flour"},
                {"amount": "1", "unit": "", "name": "Egg"},
            ],
        },
        {
            "title": "Bread",
            "ingredients": [
                {"amount": "1 1/2", "unit": "cups", "name": "flour "},
                {"amount": "200", "unit": "g", "name": "flour"},
                {"amount": "100", "unit": "g", "name": "flour"},
            ],
        },
    ]
