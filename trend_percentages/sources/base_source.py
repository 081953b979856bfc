"""Base class for trend sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from trend_percentages.models import ParameterId, Sample, TrendWindow


class TrendSource(ABC):
    """Retrieves the trend records of a single parameter."""

    name: str = "base"

    @abstractmethod
    def retrieve_samples(
        self,
        parameter_id: ParameterId | str,
        window: TrendWindow
    ) -> list[Sample]:
        """Retrieve samples for a parameter up to the end of a window.

        Samples before ``window.start`` must be included when available, since
        the latest of them establishes the state the window opens in.

        Args:
            parameter_id: Parameter to query.
            window: Requested window.

        Returns:
            Samples at or before ``window.end``. Empty when the parameter has
            no trend data.

        Raises:
            RetrievalFailure: If the backing store could not be queried.
        """
        raise NotImplementedError
