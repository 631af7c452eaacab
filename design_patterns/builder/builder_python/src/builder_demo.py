import argparse
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class PizzaNotBuiltError(RuntimeError):
    pass


class Pizza:

    def __init__(self):
        self.dough = ""
        self.sauce = ""
        self.topping = ""

    def set_dough(self, dough: str):
        self.dough = dough

    def set_sauce(self, sauce: str):
        self.sauce = sauce

    def set_topping(self, topping: str):
        self.topping = topping

    def open(self) -> str:
        description = str(self)
        print(description)
        return description

    def __str__(self):
        return "Pizza with %s dough, " \
               "%s sauce and " \
               "%s topping. Mmm." \
               % (self.dough, self.sauce, self.topping)


# Builder abstraction. Child classes
# are expected to implement the build steps
class PizzaBuilder:

    def __init__(self):
        self.pizza: Optional[Pizza] = None

    def get_pizza(self) -> Pizza:
        if self.pizza is None:
            raise PizzaNotBuiltError("%s has not created a pizza yet" % type(self).__name__)
        return self.pizza

    def create_new_pizza_product(self):
        self.pizza = Pizza()

    def build_dough(self):
        raise NotImplementedError

    def build_sauce(self):
        raise NotImplementedError

    def build_topping(self):
        raise NotImplementedError


class HawaiianPizzaBuilder(PizzaBuilder):

    def build_dough(self):
        self.pizza.set_dough("cross")

    def build_sauce(self):
        self.pizza.set_sauce("mild")

    def build_topping(self):
        self.pizza.set_topping("ham+pineapple")


class SpicyPizzaBuilder(PizzaBuilder):

    def build_dough(self):
        self.pizza.set_dough("pan baked")

    def build_sauce(self):
        self.pizza.set_sauce("hot")

    def build_topping(self):
        self.pizza.set_topping("pepperoni+salami")


# Director. Knows the order of the steps,
# but nothing about the pizza being assembled
class Cook:

    def __init__(self):
        self.pizza_builder: Optional[PizzaBuilder] = None

    def make_pizza(self, pizza_builder: PizzaBuilder) -> Pizza:
        # a failed step must not leave a half-built pizza to open
        self.pizza_builder = None
        pizza_builder.create_new_pizza_product()
        logger.debug("%s: building dough", type(pizza_builder).__name__)
        pizza_builder.build_dough()
        logger.debug("%s: building sauce", type(pizza_builder).__name__)
        pizza_builder.build_sauce()
        logger.debug("%s: building topping", type(pizza_builder).__name__)
        pizza_builder.build_topping()
        self.pizza_builder = pizza_builder
        return pizza_builder.get_pizza()

    def open_pizza(self) -> str:
        if self.pizza_builder is None:
            raise PizzaNotBuiltError("make_pizza() must be called before open_pizza()")
        return self.pizza_builder.get_pizza().open()


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Builder pattern demo")
    parser.add_argument("--verbose", action="store_true", help="log every build step")
    args = parser.parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    cook = Cook()
    hawaiian_pizza_builder = HawaiianPizzaBuilder()
    spicy_pizza_builder = SpicyPizzaBuilder()

    cook.make_pizza(hawaiian_pizza_builder)
    cook.open_pizza()

    cook.make_pizza(spicy_pizza_builder)
    cook.open_pizza()


if __name__ == '__main__':
    logging.basicConfig()
    main()
