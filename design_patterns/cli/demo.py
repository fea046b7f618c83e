"""
Design patterns demo driver

Runs the six examples in order and prints their results to stdout.
Logs go to stderr, so stdout carries only the transcript.
"""
from typing import Callable

from design_patterns.creational import SingletonHolder, Person
from design_patterns.structural import Adaptee, Adapter, Target, Car, SpecialOffer
from design_patterns.behavioral import (
    State,
    StateContext,
    StrategyContext,
    ConcreteStrategy1,
    ConcreteStrategy2,
)
from design_patterns.utils.error_handler import ErrorContext
from design_patterns.utils.logger import get_logger

logger = get_logger(__name__)

Emit = Callable[[str], None]


def run_singleton(emit: Emit = print):
    a = SingletonHolder.instance()
    a.name = "sape"
    emit(a.name)

    b = SingletonHolder.instance()
    emit(b.name)


def run_prototype(emit: Emit = print):
    p1 = Person(name="Pepe", age=12)
    p2 = p1.clone()
    p2.name = "Lolo"
    emit(p1.name)


def run_adapter(emit: Emit = print):
    adaptee = Adaptee()
    target: Target = Adapter(adaptee)
    emit(target.request())


def run_decorator(emit: Emit = print):
    car = Car()
    offer = SpecialOffer(car)
    offer.discount_percentage = 30
    offer.offer = "30% OFF"
    emit(offer.describe())


def run_state(emit: Emit = print):
    context = StateContext(State.STATE_1, emit=emit)
    context.request()
    context.request()
    context.request()


def run_strategy(emit: Emit = print):
    context = StrategyContext(emit=emit)
    context.set_strategy(ConcreteStrategy1())
    context.do_some_business_logic()
    context.set_strategy(ConcreteStrategy2())
    context.do_some_business_logic()


STAGES = (
    ("singleton", run_singleton),
    ("prototype", run_prototype),
    ("adapter", run_adapter),
    ("decorator", run_decorator),
    ("state", run_state),
    ("strategy", run_strategy),
)


def run_all(emit: Emit = print):
    """Run every example in order"""
    for stage, run in STAGES:
        logger.debug(f"Running {stage} example")
        with ErrorContext(stage, logger=logger):
            run(emit)


def main() -> int:
    """Console entry point"""
    run_all()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
