import asyncio
import logging

import orjson
import typer

from kernelsim.catalog import KERNEL_MODELS, KERNELSPECS
from kernelsim.emulators.context import create_simple_session_context
from kernelsim.log_utils import setup_logging
from kernelsim.models.messages import Message

app = typer.Typer(no_args_is_help=True)


def _dumps(obj) -> str:
    return orjson.dumps(obj, option=orjson.OPT_INDENT_2).decode()


@app.command()
def specs():
    """Print the kernel spec catalog and the running kernel models"""
    payload = {
        "kernelspecs": [spec.model_dump() for spec in KERNELSPECS],
        "running": [model.model_dump() for model in KERNEL_MODELS],
    }
    typer.echo(_dumps(payload))


async def _execute(code: str, kernel_name: str, count: int):
    context = create_simple_session_context({"path": "cli.ipynb", "kernel": {"name": kernel_name}})
    await context.ready

    def on_iopub(sender, msg: Message):
        typer.echo(_dumps(msg.model_dump(mode="json")))

    context.iopub_message.connect(on_iopub)
    for _ in range(count):
        await context.session.kernel.request_execute(code)
    context.dispose()


@app.command()
def execute(
    code: str,
    kernel_name: str = typer.Option(KERNEL_MODELS[0].name, "--kernel", "-k"),
    count: int = typer.Option(1, "--count", "-n", min=1),
    verbose: bool = False,
):
    """Send CODE through an emulated session context and print every iopub message"""
    setup_logging(logging.DEBUG if verbose else None)
    asyncio.run(_execute(code, kernel_name, count))


if __name__ == "__main__":
    app()
