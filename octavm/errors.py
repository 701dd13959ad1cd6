"""Exceptions raised at the machine boundary."""

from typing import Optional


class OctaVMError(Exception):
    """Base class for interpreter errors."""


class UnimplementedInstruction(OctaVMError):
    """Raised when the fetched word matches no known instruction."""

    def __init__(self, instruction: int, address: int):
        self.instruction = instruction
        self.address = address
        super().__init__(f"Unimplemented instruction 0x{instruction:04X} at 0x{address:03X}")


class AddressOutOfRange(OctaVMError):
    """Raised when a fetch, a sprite read or a ROM load leaves memory."""

    def __init__(self, address: int, instruction: Optional[int] = None):
        self.address = address
        self.instruction = instruction
        if instruction is None:
            message = f"Address 0x{address:03X} out of range"
        else:
            message = f"Instruction 0x{instruction:04X} at 0x{address:03X} accessed memory out of range"
        super().__init__(message)
