import argparse
import logging
import threading
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)


# Shared id source for every shape, whatever its concrete type
class ShapeIdCounter:

    def __init__(self, start: int = 0):
        self.next_value = start
        self.lock = threading.Lock()

    def next_id(self) -> int:
        with self.lock:
            value = self.next_value
            self.next_value += 1
        return value

    def peek(self) -> int:
        return self.next_value


class Shape:

    def __init__(self, shape_id: int):
        self.id = shape_id

    def draw(self) -> str:
        raise NotImplementedError

    def _draw(self, kind: str) -> str:
        message = "%s %s: draw" % (kind, self.id)
        print(message)
        return message


class Circle(Shape):

    def draw(self) -> str:
        return self._draw("circle")


class Square(Shape):

    def draw(self) -> str:
        return self._draw("square")


class Ellipse(Shape):

    def draw(self) -> str:
        return self._draw("ellipse")


class Rectangle(Shape):

    def draw(self) -> str:
        return self._draw("rectangle")


# Factory abstraction. Each concrete factory
# binds both roles to one family of shapes
class ShapeFactory:

    def __init__(self, counter: ShapeIdCounter):
        self.counter = counter

    def create_curved_instance(self) -> Shape:
        raise NotImplementedError

    def create_straight_instance(self) -> Shape:
        raise NotImplementedError

    def _create(self, shape_type: type) -> Shape:
        shape = shape_type(self.counter.next_id())
        logger.debug("%s created %s %d", type(self).__name__, type(shape).__name__, shape.id)
        return shape


class SimpleShapeFactory(ShapeFactory):

    def create_curved_instance(self) -> Shape:
        return self._create(Circle)

    def create_straight_instance(self) -> Shape:
        return self._create(Square)


class RobustShapeFactory(ShapeFactory):

    def create_curved_instance(self) -> Shape:
        return self._create(Ellipse)

    def create_straight_instance(self) -> Shape:
        return self._create(Rectangle)


class ShapeFactoryType(Enum):
    SIMPLE = "simple"
    ROBUST = "robust"


def create_factory(factory_type: ShapeFactoryType, counter: ShapeIdCounter) -> ShapeFactory:
    if factory_type == ShapeFactoryType.SIMPLE:
        factory = SimpleShapeFactory(counter)
    elif factory_type == ShapeFactoryType.ROBUST:
        factory = RobustShapeFactory(counter)
    else:
        raise ValueError("Unknown factory type %r" % (factory_type,))
    logger.debug("Selected %s", type(factory).__name__)
    return factory


# Calling code only knows the factory interface,
# so swapping the factory swaps the whole family
def draw_shapes(factory: ShapeFactory) -> List[Shape]:
    shapes = [
        factory.create_curved_instance(),
        factory.create_straight_instance(),
        factory.create_curved_instance(),
    ]
    for shape in shapes:
        shape.draw()
    return shapes


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Abstract Factory pattern demo")
    parser.add_argument("--factory",
                        choices=[factory_type.value for factory_type in ShapeFactoryType],
                        default=ShapeFactoryType.SIMPLE.value,
                        help="family of shapes to create")
    parser.add_argument("--verbose", action="store_true", help="log shape id assignment")
    args = parser.parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    factory = create_factory(ShapeFactoryType(args.factory), ShapeIdCounter())
    draw_shapes(factory)


if __name__ == '__main__':
    logging.basicConfig()
    main()
