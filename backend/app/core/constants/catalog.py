"""
Catalog constants — static design list used when the board has no designs.

Version: 1.0.0
"""
from typing import Any, Dict, List

DEFAULT_MOCKUP_URL: str = (
    "https://images.pexels.com/photos/1036936/pexels-photo-1036936.jpeg"
    "?auto=compress&cs=tinysrgb&w=800&h=400&fit=crop"
)

STATIC_DESIGNS: List[Dict[str, Any]] = [
    {
        "id": "design-1",
        "name": "Classic Business Logo",
        "original_width": 400,
        "original_height": 200,
        "elements": 5,
        "led_length": 12,
        "mockup_url": DEFAULT_MOCKUP_URL,
        "description": "Classic company logo with clean lines",
    },
    {
        "id": "design-2",
        "name": "Modern Script Text",
        "original_width": 300,
        "original_height": 100,
        "elements": 8,
        "led_length": 18,
        "mockup_url": DEFAULT_MOCKUP_URL,
        "description": "Modern script lettering for an elegant look",
    },
    {
        "id": "design-3",
        "name": "Geometric Pattern",
        "original_width": 250,
        "original_height": 250,
        "elements": 12,
        "led_length": 25,
        "mockup_url": DEFAULT_MOCKUP_URL,
        "description": "Geometric pattern for eye-catching designs",
    },
    {
        "id": "design-4",
        "name": "Restaurant Sign",
        "original_width": 500,
        "original_height": 150,
        "elements": 6,
        "led_length": 20,
        "mockup_url": DEFAULT_MOCKUP_URL,
        "description": "Made for restaurants and bars",
    },
    {
        "id": "design-5",
        "name": "Minimalist Icon",
        "original_width": 150,
        "original_height": 150,
        "elements": 3,
        "led_length": 8,
        "mockup_url": DEFAULT_MOCKUP_URL,
        "description": "Minimalist icon design",
    },
]

# Configuration limits (cm)
MIN_WIDTH_CM: int = 20
MAX_WIDTH_CM: int = 1000
MAX_SINGLE_PART_WIDTH_CM: int = 300
MAX_SINGLE_PART_HEIGHT_CM: int = 200
MAX_HEIGHT_CM: int = 500
