"""Interactive questions asked by the wizard."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .config import SetupAnswers, SetupOptions
from .models import ProjectType

QUESTIONS: Dict[str, str] = {
    "use_typescript": "Are you using TypeScript?",
    "use_husky": "Do you want to set up Husky and lint-staged for pre-commit hooks?",
    "use_strict": "Do you want to enable strict mode for ESLint?",
    "use_prettier": "Do you want to use Prettier for code formatting?",
}


class Prompter:
    """Terminal questions; rich keeps asking until an answer is valid."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def choose(self, question: str, choices: Sequence[str]) -> str:
        answer = Prompt.ask(
            question,
            choices=list(choices),
            console=self.console,
            case_sensitive=False,
        )
        return answer.lower()

    def confirm(self, question: str, default: bool = False) -> bool:
        return Confirm.ask(question, console=self.console, default=default)


def ask_options(prompter: Prompter, answers: Optional[SetupAnswers] = None) -> SetupOptions:
    """Fill in every field the answers file left unset."""

    values = (answers or SetupAnswers()).model_dump(exclude_none=True)
    if "project_type" not in values:
        values["project_type"] = prompter.choose(
            "What type of project are you working on?", ProjectType.choices()
        )
    for field, question in QUESTIONS.items():
        if field not in values:
            values[field] = prompter.confirm(question)
    return SetupOptions.model_validate(values)


__all__ = ["Prompter", "QUESTIONS", "ask_options"]
