"""
Prompt templates for the completion service.
"""

from .value_objects import TERMS_PER_LESSON


TERMS_PROMPT_TEMPLATE = """\
It is very important that your reply contains no explanation or extra text, \
only the result in the simplest possible form, following this example:
["term 1", "term 2", "term 3"]

------ Now, the instructions.

I am building a tool that searches for images and returns a list of them.
Its purpose is to take the outline of a lesson I am preparing and bring back \
relevant images that illustrate the topic.

For the lesson text below, give me the full search terms I should use to find \
images. The terms must be detailed, so that the images found are as close as \
possible to the reality being described.
Reply ONLY with a JSON array of strings, with no surrounding prose or code.
It is important that there are exactly {count} terms, chosen to best represent \
the idea of the lesson text, each one distinct from the others.


----- Lesson text:

{lesson_text}

Answer:
"""


def build_terms_prompt(lesson_text: str, count: int = TERMS_PER_LESSON) -> str:
    """
    Build the instruction asking for `count` image search phrases.

    The lesson text is embedded verbatim, including when it is empty.

    Args:
        lesson_text: Raw lesson text submitted by the user
        count: Number of phrases to ask for

    Returns:
        The full prompt text
    """
    # Lesson text may contain braces: substitute it last, with replace
    return TERMS_PROMPT_TEMPLATE.replace("{count}", str(count)).replace(
        "{lesson_text}", lesson_text
    )
