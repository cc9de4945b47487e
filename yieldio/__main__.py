import importlib
from typing import Annotated
from typing import Any

from typer import Argument
from typer import Exit
from typer import Option
from typer import Typer

from .bus import Bus
from .config import Config
from .drain import take
from .event import Event
from .generator import GENERATOR_REGISTRY
from .status import Status

app = Typer()


def _register(config: Config):
    for module_name in config.register:
        importlib.import_module(module_name)


def _parse_arg(value: str) -> Any:
    try:
        return int(value)
    except ValueError:
        return value


@app.command()
def generators():
    """Show all registered generators."""
    _register(Config.load())

    if not GENERATOR_REGISTRY:
        print("No generators registered.")
        return

    functions = list(GENERATOR_REGISTRY.values())
    paths = [f"{f.fn.__module__}.{f.fn.__qualname__}" for f in functions]
    name_width = max(len("Name"), max(len(f.name) for f in functions))
    path_width = max(len("Path"), max(len(path) for path in paths))

    print(f"{'Name':<{name_width}} | {'Path':<{path_width}}")
    print(f"{'-' * name_width}-+-{'-' * path_width}")
    for function, path in zip(functions, paths, strict=True):
        print(f"{function.name:<{name_width}} | {path:<{path_width}}")


@app.command()
def run(
    name: Annotated[str, Argument(help="Name of a registered generator.")],
    args: Annotated[
        list[str] | None,
        Argument(help="Arguments for the generator. Integers are converted."),
    ] = None,
    limit: Annotated[
        int | None,
        Option(min=1, help="Stop after this many values. Defaults to config."),
    ] = None,
    trace: Annotated[bool, Option(help="Print lifecycle events.")] = False,
):
    """Run a generator and print what it yields.

    Infinite generators are cut off at the limit; the return value is only
    printed when the generator completes.
    """
    config = Config.load()
    _register(config)

    if name not in GENERATOR_REGISTRY:
        print(f"Error: No generator named {name!r}")
        raise Exit(code=1)

    computation = GENERATOR_REGISTRY[name](*map(_parse_arg, args or []))
    bus = Bus()
    events = bus.subscribe({Event})
    try:
        with bus.activate():
            values = take(computation, limit or config.limit)
    except Exception as error:
        print(f"Error: {name} raised {error!r}")
        raise Exit(code=1) from error
    finally:
        bus.shutdown()

    if trace:
        while not events.empty():
            print(events.get_nowait())
        return

    for value in values:
        print(value)
    if computation.status is Status.COMPLETED:
        print(f"returned {computation.return_value!r}")
    else:
        print("...")


if __name__ == "__main__":
    app()
