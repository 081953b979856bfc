"""Parameter identity: DataMiner ID, element ID, parameter ID and optional instance."""

from __future__ import annotations

from dataclasses import dataclass

from trend_percentages.errors import InvalidParameterId


@dataclass(frozen=True)
class ParameterId:
    """Identifies a single trended parameter, optionally a table cell."""
    dma_id: int
    element_id: int
    parameter_id: int
    instance: str | None = None

    @classmethod
    def parse(cls, text: str) -> ParameterId:
        """Parse a ``dma/element/parameter[/instance]`` string.

        Args:
            text: The parameter ID as entered by the user.

        Returns:
            Parsed ParameterId.

        Raises:
            InvalidParameterId: If the text is blank, has the wrong number of
                parts, or the first three parts are not integers.
        """
        if text is None or not text.strip():
            raise InvalidParameterId("Parameter ID is required")

        parts = text.strip().split("/")
        if len(parts) not in (3, 4):
            raise InvalidParameterId(
                f"Invalid parameter ID '{text}': expected dma/element/parameter[/instance]"
            )

        try:
            dma_id, element_id, parameter_id = (int(part) for part in parts[:3])
        except ValueError:
            raise InvalidParameterId(
                f"Invalid parameter ID '{text}': IDs must be integers"
            ) from None

        instance = parts[3] if len(parts) == 4 else None
        return cls(dma_id, element_id, parameter_id, instance)

    def __str__(self) -> str:
        base = f"{self.dma_id}/{self.element_id}/{self.parameter_id}"
        return f"{base}/{self.instance}" if self.instance is not None else base
