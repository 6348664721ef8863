from attrs import frozen

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@frozen
class ShellConfig:
    """Settings for one interpreter run.

    Params:
        prompt_suffix: Text written after the working path in the prompt.
        quit_command: Line (after trimming) that ends the read loop.
        log_level: Name of the root logging level.
    """

    prompt_suffix: str = "$ "
    quit_command: str = "quit"
    log_level: str = "WARNING"

    def prompt(self, pwd: str) -> str:
        return f"{pwd}{self.prompt_suffix}"
