import pytest
from shapeforge.core.attributes import STROKE_PLACEMENT, StrokePlacement
from shapeforge.core.figure import Figure


class SignalCatcher:
    """A simple callable class to catch and store signal emissions."""

    def __init__(self):
        self.calls = []

    def __call__(self, sender, **kwargs):
        self.calls.append({"sender": sender, **kwargs})

    @property
    def call_count(self):
        return len(self.calls)

    def last(self):
        return self.calls[-1] if self.calls else None


@pytest.fixture
def catcher():
    return SignalCatcher()


@pytest.fixture
def triangle():
    """A 10x10 triangle pointing north at the origin."""
    return Figure(0, 0, 10, 10)


@pytest.fixture
def bare_triangle():
    """Like `triangle`, but with the stroke inside so nothing is grown."""
    fig = Figure(0, 0, 10, 10)
    fig.attr.set(STROKE_PLACEMENT, StrokePlacement.INSIDE)
    return fig
