"""Application service for running examples."""

from typing import Any, Dict, List, Optional

from solid_city.application.examples import get_example, list_examples
from solid_city.domain.base.ports import ConsolePort
from solid_city.domain.core.exceptions import ContractViolationError
from solid_city.infrastructure.console import BufferedConsole, StdoutConsole
from solid_city.infrastructure.logging.logger import get_logger


class ExampleApplicationService:
    """Looks up examples in the catalog and runs them against a console."""

    def __init__(self, console: Optional[ConsolePort] = None, logger: Any = None) -> None:
        self._console = console or StdoutConsole()
        self._logger = logger or get_logger(__name__)

    def run_example(self, name: str, counter_example: bool = False) -> None:
        """Run an example, writing to the service console."""
        self._run(name, counter_example, self._console)

    def capture_example(self, name: str, counter_example: bool = False) -> List[str]:
        """
        Run an example and return the lines it wrote.

        A ContractViolationError still propagates; the lines written before
        the failure are available on ``error.output``.
        """
        console = BufferedConsole()
        try:
            self._run(name, counter_example, console)
        except ContractViolationError as e:
            e.output = console.lines
            raise
        return console.lines

    def describe_examples(self) -> List[Dict[str, str]]:
        return [example.to_dict() for example in list_examples()]

    def _run(self, name: str, counter_example: bool, console: ConsolePort) -> None:
        example = get_example(name)
        driver = example.counter_example if counter_example else example.run

        self._logger.debug(
            "Running example",
            example=example.name,
            counter_example=counter_example,
        )
        try:
            driver(console)
        except ContractViolationError as e:
            self._logger.warning(
                "Contract violation",
                example=example.name,
                variant=e.variant,
                capability=e.capability,
                error=str(e),
            )
            raise
        self._logger.debug("Example finished", example=example.name)
