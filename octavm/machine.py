"""Stateful CHIP-8 machine built on the functional emulator core."""

from pathlib import Path
from typing import Optional, Union

import jax.numpy as jnp
import numpy as np
from tqdm import tqdm

from octavm.config import MachineConfig
from octavm.constants import PROGRAM_START, MEMORY_SIZE, FAULT_NONE, FAULT_UNIMPLEMENTED_INSTRUCTION
from octavm.emulator import step
from octavm.errors import AddressOutOfRange, UnimplementedInstruction
from octavm.logging import ExecutionLogger
from octavm.rendering import display_to_text
from octavm.state import EmulatorState, create_state


def _read_only(array: jnp.ndarray) -> np.ndarray:
    view = np.array(array)
    view.setflags(write=False)
    return view


class Machine:
    """CHIP-8 machine owning a single EmulatorState.

    ``step()`` is the only operation that advances execution. A step that
    faults raises and leaves the state exactly as it was before the step, so
    the caller can log the error, ``skip()`` the instruction, or give up.

    Example:
        >>> machine = Machine(rom_bytes)
        >>> machine.run(700)
        >>> print(machine.render())
    """

    def __init__(
        self,
        rom: bytes,
        config: Optional[MachineConfig] = None,
        logger: Optional[ExecutionLogger] = None,
    ):
        self.config = config or MachineConfig()
        self.logger = logger or ExecutionLogger(
            log_level=self.config.log_level,
            use_colors=self.config.use_colors,
            show_timestamps=self.config.show_timestamps,
        )
        try:
            self._state = create_state(rom)
        except AddressOutOfRange as error:
            self.logger.log_fault(error)
            raise
        self.steps = 0
        self.logger.log_rom_loaded(len(rom), PROGRAM_START)

    @classmethod
    def from_file(cls, filename: Union[str, Path], **kwargs) -> "Machine":
        """Load a ROM image from disk."""
        with open(filename, "rb") as f:
            rom_data = f.read()
        return cls(rom_data, **kwargs)

    @property
    def state(self) -> EmulatorState:
        return self._state

    @property
    def display(self) -> np.ndarray:
        """Read-only (64, 32) pixel grid indexed [x, y]."""
        return _read_only(self._state.display)

    @property
    def registers(self) -> np.ndarray:
        return _read_only(self._state.V)

    @property
    def memory(self) -> np.ndarray:
        return _read_only(self._state.memory)

    @property
    def pc(self) -> int:
        return int(self._state.pc)

    @property
    def index(self) -> int:
        """Address register I."""
        return int(self._state.I)

    def pixel(self, x: int, y: int) -> bool:
        return bool(self._state.display[x, y])

    def render(self) -> str:
        return display_to_text(self._state.display)

    def step(self) -> None:
        """Advance the machine by exactly one instruction."""
        address = self.pc
        new_state, instruction = step(self._state)
        fault = int(new_state.fault)

        if fault != FAULT_NONE:
            if fault == FAULT_UNIMPLEMENTED_INSTRUCTION:
                error = UnimplementedInstruction(int(instruction), address)
            elif address + 1 >= MEMORY_SIZE:
                error = AddressOutOfRange(address)
            else:
                error = AddressOutOfRange(address, int(instruction))
            self.logger.log_fault(error)
            raise error

        if self.config.trace:
            self.logger.log_step(address, int(instruction))
        self._state = new_state
        self.steps += 1

    def skip(self) -> None:
        """Move past the instruction at the program counter without executing it."""
        self._state = self._state.replace(pc=self._state.pc + 2)

    def run(self, steps: int) -> None:
        """Call step() ``steps`` times, stopping at the first fault."""
        for _ in tqdm(range(steps), desc="Executing", unit="step", disable=not self.config.progress):
            self.step()
