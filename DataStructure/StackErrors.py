class StackError(Exception):
    """Error base para las operaciones de la pila"""


class StackUnderflow(StackError, IndexError):
    """
    Se intentó extraer o consultar el tope de una pila vacía.
    Hereda de IndexError para mantener la semántica de list.pop().
    """


class StackOverflow(StackError):
    """Se intentó apilar sobre una pila acotada que ya está llena"""

    def __init__(self, capacity: int):
        super().__init__(f"push onto full stack (capacity={capacity})")
        self.capacity = capacity
