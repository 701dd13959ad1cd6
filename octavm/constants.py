"""CHIP-8 machine constants."""

PROGRAM_START = 0x200
MEMORY_SIZE = 4095
ADDRESS_MASK = 0xFFF

NUM_REGISTERS = 16
FLAG_REGISTER = 0xF

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
SPRITE_WIDTH = 8

# Fault codes recorded in EmulatorState.fault
FAULT_NONE = 0
FAULT_UNIMPLEMENTED_INSTRUCTION = 1
FAULT_ADDRESS_OUT_OF_RANGE = 2
