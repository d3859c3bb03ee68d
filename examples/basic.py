"""Basic Example: a short project-setup prompt sequence."""

from __future__ import annotations

import sys
import time

import clack
from clack import log


def validate_name(value: str) -> str | None:
    if not value:
        return "Please enter a name."
    if not value[0].isalpha():
        return "Name must start with a letter."
    return None


def main() -> None:
    clack.intro("create-my-app")

    try:
        name = (
            clack.input("Where should we create your project?")
            .placeholder("sparkling-solid")
            .validate(validate_name)
            .interact()
        )
        clack.password("Provide a password").mask("▪").interact()
        kind = (
            clack.select("Pick a project type")
            .item("ts", "TypeScript", "")
            .item("js", "JavaScript", "")
            .item("coffee", "CoffeeScript", "oh no")
            .interact()
        )
        tools = (
            clack.multiselect("Select additional tools")
            .item("eslint", "ESLint", "recommended")
            .item("prettier", "Prettier", "")
            .item("gh-action", "GitHub Actions", "")
            .initial_values(["eslint"])
            .interact()
        )
        install = clack.confirm("Install dependencies?").interact()
    except clack.PromptCancelled:
        clack.outro_cancel("Operation cancelled")
        sys.exit(0)

    if install:
        with clack.spinner() as spinner:
            spinner.start("Installing via npm")
            time.sleep(1.5)
            spinner.set_message("Linking packages")
            time.sleep(1.0)
        log.success("Dependencies installed")

    log.info(f"Project type: {kind}")
    log.step(f"Tools: {', '.join(tools) or 'none'}")
    clack.note("Next steps", f"cd {name}\nnpm run dev")
    clack.outro("You're all set!")


if __name__ == "__main__":
    main()
