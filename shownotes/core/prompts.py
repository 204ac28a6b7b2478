"""
Interactive SEO questions asked before generation.
"""

from typing import Callable, Optional

from rich.console import Console
from rich.prompt import Prompt

from shownotes.models.schemas import SEODetails

SEO_QUESTIONS = [
    ("main_keyword", "What is the main keyword or topic for this episode?"),
    ("guest_expertise", "What is the guest's expertise or background?"),
    ("target_audience", "Who is the target audience for this episode?"),
    ("key_takeaways", "What are the key takeaways for this episode? (3-5 bullet points)"),
]


def prompt_for_seo_details(
    ask: Optional[Callable[..., str]] = None,
    console: Optional[Console] = None,
) -> SEODetails:
    """
    Ask the operator the SEO questions; every answer is optional.

    Args:
        ask: Prompt function (defaults to rich's Prompt.ask)
        console: Console used for the prompts (stderr by default)

    Returns:
        SEODetails with blank answers left unset
    """
    ask = ask or Prompt.ask
    console = console or Console(stderr=True)

    console.print("[bold cyan]SEO details[/bold cyan] [dim](press Enter to skip)[/dim]")
    answers = {}
    for field, question in SEO_QUESTIONS:
        answers[field] = ask(question, default="", show_default=False, console=console)
    return SEODetails(**answers)
