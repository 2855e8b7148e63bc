"""Deterministic stand-ins for the model client and the tracer."""

from typing import Any, List, Optional


class FakeModel:
    model_name = "fake-model"

    def __init__(self, reply: str = "Hello", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def generate_content(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeGeneration:
    def __init__(self, name: str, input: Any, **kwargs: Any):
        self.name = name
        self.input = input
        self.kwargs = kwargs
        self.outputs: List[Any] = []

    def end(self, output: Any = None, **kwargs: Any) -> None:
        self.outputs.append(output)


class FakeTrace:
    def __init__(self, name: str, fail_generation: Optional[Exception] = None):
        self.name = name
        self.fail_generation = fail_generation
        self.generations: List[FakeGeneration] = []

    def generation(self, name: str, input: Any = None, **kwargs: Any) -> FakeGeneration:
        if self.fail_generation is not None:
            raise self.fail_generation
        gen = FakeGeneration(name, input, **kwargs)
        self.generations.append(gen)
        return gen


class FakeTracer:
    enabled = True

    def __init__(
        self,
        fail_trace: Optional[Exception] = None,
        fail_generation: Optional[Exception] = None,
    ):
        self.fail_trace = fail_trace
        self.fail_generation = fail_generation
        self.traces: List[FakeTrace] = []
        self.flushed = 0

    def trace(self, name: str, **kwargs: Any) -> FakeTrace:
        if self.fail_trace is not None:
            raise self.fail_trace
        tr = FakeTrace(name, fail_generation=self.fail_generation)
        self.traces.append(tr)
        return tr

    def flush(self) -> None:
        self.flushed += 1


class FakeLangfuseClient:
    """Mimics the subset of the Langfuse SDK the tracer calls."""

    def __init__(self, fail_on: Optional[str] = None):
        self.fail_on = fail_on
        self.calls: List[tuple] = []

    def _maybe_fail(self, what: str) -> None:
        if self.fail_on == what:
            raise RuntimeError(f"{what} rejected")

    def trace(self, **kwargs: Any) -> "FakeLangfuseClient":
        self._maybe_fail("trace")
        self.calls.append(("trace", kwargs))
        return self

    def generation(self, **kwargs: Any) -> "FakeLangfuseClient":
        self._maybe_fail("generation")
        self.calls.append(("generation", kwargs))
        return self

    def end(self, **kwargs: Any) -> None:
        self._maybe_fail("end")
        self.calls.append(("end", kwargs))

    def flush(self) -> None:
        self._maybe_fail("flush")
        self.calls.append(("flush", {}))
