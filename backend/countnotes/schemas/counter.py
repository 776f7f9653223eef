"""Counter Schemas — response shape for counter endpoints."""

from pydantic import BaseModel

from countnotes.core.counter_value import CounterValue


class CounterResponse(BaseModel):
    value: int

    @classmethod
    def from_counter(cls, counter: CounterValue) -> "CounterResponse":
        return cls(value=counter.value)
