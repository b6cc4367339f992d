from enum import IntEnum
from typing import Callable, Dict, Optional

from va_compensation_calculator.config import (
    DEFAULT_COMPENSATION_RATES,
    RATING_MAX,
    RATING_MIN,
)
from va_compensation_calculator.console import ConsoleSession
from va_compensation_calculator.exceptions import InputExhaustedError
from va_compensation_calculator.logging_config import get_logger
from va_compensation_calculator.models import (
    CompensationRatesConfig,
    RatingList,
    ScenarioName,
)
from va_compensation_calculator.presenters import format_comparison, format_scenario
from va_compensation_calculator.store import ScenarioStore, coerce_rating

logger = get_logger(__name__)

MENU_TITLE = "===== VA Disability Compensation Calculator ====="
FAREWELL = "Exiting program. Thank you for using the VA Calculator."


class MenuChoice(IntEnum):
    ENTER_CURRENT = 1
    ENTER_PROPOSED = 2
    SHOW_CURRENT = 3
    COMPARE = 4
    EXIT = 5


MENU_LABELS = {
    MenuChoice.ENTER_CURRENT: "Enter CURRENT ratings",
    MenuChoice.ENTER_PROPOSED: "Enter PROPOSED ratings",
    MenuChoice.SHOW_CURRENT: "Show combined rating & estimated pay (CURRENT)",
    MenuChoice.COMPARE: "Compare CURRENT vs PROPOSED",
    MenuChoice.EXIT: "Exit",
}


class MenuLoop:
    """
    Read a menu choice, run it, and show the menu again until Exit.

    Running out of input is treated the same as choosing Exit.
    """

    def __init__(
        self,
        console: ConsoleSession,
        store: Optional[ScenarioStore] = None,
        rates: CompensationRatesConfig = DEFAULT_COMPENSATION_RATES,
    ) -> None:
        self.console = console
        self.store = store if store is not None else ScenarioStore()
        self.rates = rates
        self._actions: Dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.ENTER_CURRENT: lambda: self.enter_ratings(ScenarioName.CURRENT),
            MenuChoice.ENTER_PROPOSED: lambda: self.enter_ratings(ScenarioName.PROPOSED),
            MenuChoice.SHOW_CURRENT: self.show_current,
            MenuChoice.COMPARE: self.compare,
        }

    def display_menu(self) -> None:
        self.console.print(MENU_TITLE)
        for choice in MenuChoice:
            self.console.print(f"{choice.value}. {MENU_LABELS[choice]}")

    def read_choice(self) -> int:
        return self.console.next_int(
            "Enter your choice: ",
            "Please enter a number from the menu: ",
        )

    def run(self) -> int:
        """Run until the user exits. Returns the process exit status."""
        try:
            while True:
                self.display_menu()
                number = self.read_choice()

                if number == MenuChoice.EXIT:
                    self.console.print(FAREWELL)
                    self.console.print()
                    break

                try:
                    choice = MenuChoice(number)
                except ValueError:
                    logger.info("Ignoring invalid menu choice %d", number)
                    self.console.print(f"Invalid choice. Please choose 1-{len(MenuChoice)}.")
                else:
                    self._actions[choice]()

                self.console.print()
        except InputExhaustedError:
            logger.info("Console input closed, exiting")
            self.console.print()
            self.console.print(FAREWELL)

        return 0

    def enter_ratings(self, name: ScenarioName) -> RatingList:
        """
        Ask how many conditions, then each rating, and store them.

        Ratings outside 0-100 are stored as 0 with a warning. Nothing is
        stored if input ends part way through.
        """
        label = name.value
        count = self.console.next_int(
            f"How many {label} conditions do you want to enter? ",
            "Please enter a whole number of conditions: ",
        )
        while count <= 0:
            count = self.console.next_int(
                "Please enter a positive number of conditions: ",
                "Please enter a whole number of conditions: ",
            )

        self.console.print(
            f"Enter each {label} rating as a whole number (10, 20, 30, etc.):"
        )

        values = []
        for i in range(1, count + 1):
            raw = self.console.next_int(
                f"Rating {i}: ",
                f"Please enter rating {i} as a whole number: ",
            )
            rating, coerced = coerce_rating(raw)
            if coerced:
                logger.info("%s rating %d out of range (%s), stored as 0", label, i, raw)
                self.console.print(
                    f"Rating should be between {RATING_MIN} and {RATING_MAX}. "
                    "Setting this one to 0."
                )
            values.append(rating)

        return self.store.record_ratings(name, values)

    def show_current(self) -> None:
        self.console.print()
        self.console.print("=== View Current Scenario ===")
        for line in format_scenario(
            ScenarioName.CURRENT,
            self.store.ratings_for(ScenarioName.CURRENT),
            self.rates,
            show_breakdown=True,
        ):
            self.console.print(line)

    def compare(self) -> None:
        self.console.print()
        self.console.print("=== Compare Current vs Proposed ===")
        for line in format_comparison(
            self.store.ratings_for(ScenarioName.CURRENT),
            self.store.ratings_for(ScenarioName.PROPOSED),
            self.rates,
        ):
            self.console.print(line)
