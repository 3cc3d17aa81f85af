def get_audit_prompt(website_content: str) -> str:
    """
    Generate the UX audit prompt for Gemini.

    Args:
        website_content: Sanitized, truncated text of the page. Embedded verbatim.

    Returns:
        Complete prompt string. The output shape itself is enforced separately
        through the response schema sent with the request.
    """

    return f"""You are a senior UX researcher. Analyze the following website content and perform a comprehensive UX audit.

Based on the text content provided, evaluate the site against:
1. **Nielsen's Heuristics** (report under "heuristics")
2. **Shneiderman's Golden Rules** (report under "golden-rules")
3. **Common user flow issues** (report under "user-flow")

For every finding, give a short title, what you observed, a concrete recommendation,
a severity (Critical, High, Medium, or Positive for things done well) and the
implementation effort (High, Medium, Low, or N/A for positive findings).

Also provide a competitive benchmark under "benchmark": a designScore from 0 to 10
and a one or two sentence summary.

Your response MUST be a valid JSON object that strictly follows the provided schema.
Do not include any text outside of the JSON object.

Website Content to Analyze:
---
{website_content}
---
"""
