"""
Product extraction from free text (quotes, emails, call notes).

The model returns a JSON object; partmatch.parse_mentions turns its
"products" array into mentions. This module only owns the prompt.
"""
import logging
from typing import Optional

from . import llm

logger = logging.getLogger(__name__)

EXTRACTION_SYSTEM_PROMPT = """Extract the following information from the input text and return it in JSON format:
{
  "customer_name": "",
  "company_name": "",
  "company_address": "",
  "products": [
    {
      "part_name": "",
      "part_id": "",
      "quantity": ""
    }
  ],
  "competitor_name": "",
  "discount_mentioned": false
}

Guidelines:
- Create a new product object in the products array for each product/part mentioned
- Fill in all fields that can be found in the text
- Leave fields empty ("") if information is not present
- For quantity, include units if specified
- Set discount_mentioned to true if any discount is mentioned in the text
- Ensure exact matches for part IDs
- Part ID contains only numbers
- If there is a space in part ID or Part name, remove all the space.
- Return only the JSON object, no additional text like json"""


def extract_products(text: str) -> Optional[str]:
    """
    Ask the model for the structured extraction of a text.

    Returns:
        The raw model output (expected to be JSON), or None on failure
    """
    result = llm.generate(
        text,
        system=EXTRACTION_SYSTEM_PROMPT,
        max_tokens=800,
        temperature=0.3,
    )
    if result is None:
        logger.error("Product extraction failed")
    return result
