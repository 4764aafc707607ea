"""
Prompts for company enrichment.

This module contains the prompts used to structure company websites with OpenAI.
"""

# System prompt for company enrichment
ENRICHMENT_SYSTEM_PROMPT = (
    "You structure company information for venture investors. Your outputs must be "
    "concise, concrete, and directly usable in a CRM."
)

# User prompt for company enrichment; formatted with name, description and website_text
ENRICHMENT_USER_PROMPT = """
You are helping a venture fund understand whether a company fits its thesis.

Company:
- Name: {name}
- Existing description: {description}

Website excerpt:
{website_text}

Return a concise JSON object with the following shape (no extra keys, no comments):
{{
  "summary": string (1-2 sentences describing the company in plain language),
  "whatTheyDo": string[] (3-5 bullets on product, customer, and workflow),
  "keywords": string[] (8-12 single or two-word phrases capturing vertical, buyer, product, and motion),
  "signals": string[] (5-8 notable signals for investors, like wedge, motion, buyers, or infra dependencies),
  "sources": [{{ "url": string, "scrapedAt": string }}]
}}

Use the website excerpt when available. If information is missing, fall back to the existing description and be explicit about any assumptions. Keep language precise and concrete.
"""
