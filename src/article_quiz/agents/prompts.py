"""
Prompt templates for quiz generation and the article assistant

All prompt engineering lives here. Question prompts ask for a bare JSON
array in the exact shape parse_questions() expects; assistant prompts ask
for the answer alone, with no chat around it.
"""

# =============================================================================
# QUESTION GENERATION PROMPTS
# =============================================================================

TRUE_FALSE_SYSTEM_PROMPT = """Based on the following article, generate True/False questions in JSON format. Each question should include:
- A "question" field with the question text.
- An "answer" field with the correct answer (true or false).
Output the questions as a JSON array. Do not include any text outside the JSON array. Generate at least {count} questions."""

MULTIPLE_CHOICE_SYSTEM_PROMPT = """Based on the following article, generate multiple-choice questions with 4 answer options in JSON format. Each question should include:
- A "question" field with the question text.
- An "options" field as an array containing 4 answer choices.
- An "answer" field indicating the correct answer from the options, using the numbers 1, 2, 3, or 4 to specify the answer.
Output the questions as a JSON array. Do not include any text outside the JSON array. Generate at least {count} questions."""

FILL_BLANK_SYSTEM_PROMPT = """Based on the following article, generate fill-in-the-blank questions in JSON format. Each question should include:
- A "question" field with the question text, where the blank is indicated by a pair of underscores (e.g., "The capital of France is __").
- An "answer" field with the correct answer.
Output the questions as a JSON array. Do not include any text outside the JSON array. Generate at least {count} questions."""

QUESTION_SYSTEM_PROMPTS = {
    "true_false": TRUE_FALSE_SYSTEM_PROMPT,
    "multiple_choice": MULTIPLE_CHOICE_SYSTEM_PROMPT,
    "fill_blank": FILL_BLANK_SYSTEM_PROMPT,
}

# =============================================================================
# ARTICLE ASSISTANT PROMPTS
# =============================================================================

ASSISTANT_SYSTEM_PROMPT = """You are a helpful assistant specialized in {task}. You are to the point and only give the answer in isolation without any chat-based fluff."""

TITLE_TASK = "writing headlines"
KEYWORDS_TASK = "extracting comma-separated keywords"

ASSISTANT_USER_PROMPT = "I have the following document: {content}"


def format_question_system_prompt(kind: str, count: int = 5) -> str:
    """
    Format the system prompt for one question kind.

    Args:
        kind: QuestionKind (or its value) to request
        count: Minimum number of questions to ask for

    Returns:
        Formatted system prompt
    """
    return QUESTION_SYSTEM_PROMPTS[kind].format(count=count)


def format_assistant_prompts(task: str, content: str) -> tuple:
    """Return (system, user) prompts for an assistant task on a document."""
    return (
        ASSISTANT_SYSTEM_PROMPT.format(task=task),
        ASSISTANT_USER_PROMPT.format(content=content),
    )
