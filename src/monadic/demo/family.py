from monadic.core.maybe import ABSENT, Maybe, Present

# Horribly contrived value classes to illustrate nested context.


class GrandChild:
    def __str__(self) -> str:
        return "I exist"


class Child:
    def __init__(self, name: str):
        self.name = name

    def __str__(self) -> str:
        return f"Child({self.name})"

    def get_son(self) -> Maybe[GrandChild]:
        return Present(GrandChild())

    def get_daughter(self) -> Maybe[GrandChild]:
        return ABSENT


class Parent:
    def get_child(self) -> Maybe[Child]:
        return Present(Child("David"))
