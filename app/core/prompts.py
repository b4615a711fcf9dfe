"""
Centralized configuration for LLM Prompts.

Every backend and every entry point builds its prompt from the templates here.
"""


class TitlePrompts:
    """Prompt templates for the Title Variation Service."""

    VARIATIONS = """Given this YouTube video title: "{title}"

Generate 5 alternative title variations that are engaging, clickable, and would perform well on YouTube. Each title should:
- Be attention-grabbing but not clickbait
- Maintain the core topic/message
- Be under 100 characters
- Use different approaches (question, statement, how-to, etc.)

Return ONLY the 5 titles, one per line, numbered 1-5. No explanations or additional text."""

    @classmethod
    def variations(cls, title: str) -> str:
        """Embed the seed title verbatim into the variations prompt."""
        return cls.VARIATIONS.format(title=title)
