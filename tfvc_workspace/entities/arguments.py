"""
Argument builder for tf command lines.
"""

SECRET_MASK = "********"


class ArgumentBuilder:
    """
    Ordered list of tf arguments where some entries are secret.

    Secret entries are passed to the process as-is but replaced by a fixed
    mask whenever the command line is rendered for logs or display.
    """

    def __init__(self, command: str):
        """
        Initialize the builder with the tf sub-command.

        Args:
            command: tf sub-command name (e.g. 'workfold')
        """
        self._command = command
        self._arguments: list[str] = []
        self._secret_indexes: set[int] = set()
        self.add(command)
        self.add_switch("noprompt")

    def add(self, argument: str) -> "ArgumentBuilder":
        self._arguments.append(argument)
        return self

    def add_secret(self, argument: str) -> "ArgumentBuilder":
        self._secret_indexes.add(len(self._arguments))
        return self.add(argument)

    def add_switch(self, switch_name: str) -> "ArgumentBuilder":
        return self.add(f"-{switch_name}")

    def build(self) -> list[str]:
        """Return the real argument list passed to the process."""
        return list(self._arguments)

    def get_command(self) -> str:
        return self._command

    def get_arguments_for_display(self) -> str:
        """Return the command line with every secret argument masked."""
        return " ".join(
            SECRET_MASK if i in self._secret_indexes else argument
            for i, argument in enumerate(self._arguments)
        )

    def __str__(self) -> str:
        return self.get_arguments_for_display()

    def __repr__(self) -> str:
        return f"ArgumentBuilder({self.get_arguments_for_display()!r})"
