"""CHIP-8 instruction decoding."""

from chex import dataclass


def x(instruction: int) -> int:
    """Second nibble (VX register)."""
    return (instruction & 0x0F00) >> 8


def y(instruction: int) -> int:
    """Third nibble (VY register)."""
    return (instruction & 0x00F0) >> 4


def n(instruction: int) -> int:
    """Fourth nibble (4-bit immediate, sprite height)."""
    return instruction & 0x000F


def nn(instruction: int) -> int:
    """Last byte (8-bit immediate)."""
    return instruction & 0x00FF


def nnn(instruction: int) -> int:
    """Last 12 bits (12-bit address)."""
    return instruction & 0x0FFF


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded CHIP-8 instruction with extracted operands."""
    raw: int
    opcode: int  # First nibble, selects the instruction family
    x: int
    y: int
    n: int
    nn: int
    nnn: int


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into components."""
    return DecodedInstruction(
        raw=instruction,
        opcode=(instruction & 0xF000) >> 12,
        x=x(instruction),
        y=y(instruction),
        n=n(instruction),
        nn=nn(instruction),
        nnn=nnn(instruction),
    )


def disassemble(instruction: int) -> str:
    """Render a mnemonic for a concrete instruction word."""
    instruction = int(instruction) & 0xFFFF
    family = instruction >> 12
    if instruction == 0x00E0:
        return "CLS"
    if family == 0x1:
        return f"JP 0x{nnn(instruction):03X}"
    if family == 0x6:
        return f"LD V{x(instruction):X}, 0x{nn(instruction):02X}"
    if family == 0x7:
        return f"ADD V{x(instruction):X}, 0x{nn(instruction):02X}"
    if family == 0xA:
        return f"LD I, 0x{nnn(instruction):03X}"
    if family == 0xD:
        return f"DRW V{x(instruction):X}, V{y(instruction):X}, {n(instruction)}"
    return f"DW 0x{instruction:04X}"
