import logging
import random
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from textchain.config import DEFAULT_LENGTH, DEFAULT_ORDER
from textchain.sampling import sample_from_sequence, sample_key

logger = logging.getLogger(__name__)


class MarkovError(Exception):
    pass


class PossibilityNotFoundError(MarkovError, KeyError):

    def __init__(self, gram: str):
        super().__init__(gram)
        self.gram = gram

    def __str__(self):
        return "No such possibility exists."


class UntrainedModelError(MarkovError, RuntimeError):

    def __str__(self):
        return "Model has no start grams; add states and call train() first."


class OrderSetting(NamedTuple):
    order: int
    warning: Optional[str] = None


class MarkovModel:
    """
    Fixed-order character Markov chain:
    - accumulates training strings ("states")
    - train() indexes every gram of length `order` with the characters
      that follow it
    - generate() random-walks the index from a random start gram
    """

    def __init__(self, order: int = DEFAULT_ORDER, seed: Optional[int] = None):
        self.states: List[str] = []
        self.start: List[str] = []
        self.possibilities: Dict[str, List[str]] = {}
        self.order = DEFAULT_ORDER
        self._rng = random.Random(seed)
        self.set_order(order)

    def add_state(self, state: Union[str, Iterable[str]]) -> None:
        if isinstance(state, str):
            self.states.append(state)
        else:
            self.states.extend(state)

    def clear(self) -> None:
        self.states = []
        self.start = []
        self.possibilities = {}
        self.order = DEFAULT_ORDER

    def get_states(self) -> Tuple[str, ...]:
        return tuple(self.states)

    def set_order(self, order: Any = DEFAULT_ORDER) -> OrderSetting:
        warning = None
        # bool is an int subclass but never a meaningful order
        if isinstance(order, bool) or not isinstance(order, int) or order <= 0:
            warning = (
                f"Order can only be a positive integer, got {order!r}. "
                f"Order is set to the default {DEFAULT_ORDER}."
            )
            logger.warning(warning)
            order = DEFAULT_ORDER

        if order != self.order and (self.start or self.possibilities):
            logger.info("Order changed from %d to %d, discarding trained grams", self.order, order)
            self.start = []
            self.possibilities = {}

        self.order = order
        return OrderSetting(order, warning)

    def get_order(self) -> int:
        return self.order

    def get_possibility(self, key: Optional[str] = None) -> Union[Tuple[str, ...], Mapping[str, Tuple[str, ...]]]:
        if key is None:
            return MappingProxyType({gram: tuple(chars) for gram, chars in self.possibilities.items()})

        if key not in self.possibilities:
            raise PossibilityNotFoundError(key)
        return tuple(self.possibilities[key])

    def clear_possibilities(self) -> None:
        self.possibilities = {}

    def train(self, order: Any = None) -> None:
        if order is not None:
            self.set_order(order)

        self.start = []
        self.clear_possibilities()
        n = self.order

        for state in self.states:
            # shorter states still contribute a partial start gram
            self.start.append(state[:n])

            for j in range(len(state) - n + 1):
                gram = state[j:j + n]
                followers = self.possibilities.setdefault(gram, [])
                # the last gram of a state has nothing after it
                if j + n < len(state):
                    followers.append(state[j + n])

        logger.info(
            "Trained order-%d model on %d states: %d start grams, %d grams",
            n, len(self.states), len(self.start), len(self.possibilities),
        )

    def generate(self, length: int = DEFAULT_LENGTH) -> str:
        if not self.start:
            raise UntrainedModelError()

        result = sample_from_sequence(self.start, self._rng)
        current = result

        for _ in range(length - self.order):
            nxt = sample_from_sequence(self.possibilities.get(current), self._rng)
            if nxt is None:
                logger.debug("Dead end at gram %r after %d chars", current, len(result))
                break

            result += nxt
            current = result[-self.order:]

        return result

    def random_gram(self) -> Optional[str]:
        return sample_key(self.possibilities, self._rng)
