import logging
import math
import sys
from pathlib import Path
from typing import Optional

import click
from yaspin import yaspin
from yaspin.spinners import Spinners

from . import __version__
from .config import FeedforwardConfig, get_config
from .console import format_vector, paced_echo
from .core import RunResult, determine_exit_code, run_forward_pass
from .errors import ArchitectureError, FeedforwardError
from .network import DEFAULT_LAYER_SIZES, Network
from .serialization import SUPPORTED_FORMATS

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("feedforward")

# Input used with the default 3-3-3 architecture when none is given
DEFAULT_NETWORK_INPUT: list[float] = [0.1, 0.3, 0.2]


def _parse_int_list(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[list[int]]:
    """Parse a comma-separated list of integers such as ``4,3,2``"""
    if value is None:
        return None
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"expected comma-separated integers, got {value!r}") from None


def _parse_float_list(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[list[float]]:
    """Parse a comma-separated list of numbers such as ``0.1,0.4,0.2``"""
    if value is None:
        return None
    try:
        values = [float(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"expected comma-separated numbers, got {value!r}") from None
    if not all(math.isfinite(v) for v in values):
        raise click.BadParameter(f"values must be finite, got {value!r}")
    return values


class DefaultCommandGroup(click.Group):
    """Custom group that makes 'run' the default command"""

    def parse_args(self, ctx, args):
        """Route arguments to 'run' unless they start with a command or a group option"""
        group_options = {opt for param in self.get_params(ctx) for opt in param.opts}
        if args and args[0] not in self.list_commands(ctx) and args[0] not in group_options:
            args = ["run", *list(args)]
        return super().parse_args(ctx, args)

    def format_help(self, ctx, formatter):
        """Show help with both commands but emphasize run as primary"""
        formatter.write_text("Feedforward - Minimal feed-forward neural network")
        formatter.write_paragraph()

        formatter.write_text("Usage:")
        with formatter.indentation():
            formatter.write_text("feedforward  # Run the 4-3-2 demonstration network")
            formatter.write_text("feedforward run [OPTIONS]  # Run a forward pass and save the trace")
            formatter.write_text("feedforward describe [OPTIONS]  # Show a network's layers and parameters")

        formatter.write_paragraph()
        formatter.write_text("Examples:")
        with formatter.indentation():
            formatter.write_text("feedforward run --layers 4,3,2 --input 0.1,0.4,0.2,0.3")
            formatter.write_text("feedforward run --default-network --seed 7 -o trace.yaml")

        formatter.write_paragraph()
        formatter.write_text("Options:")
        self.format_options(ctx, formatter)


@click.group(cls=DefaultCommandGroup, invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Feedforward CLI - build a randomly initialized network and run a forward pass.

    With no command, runs the demonstration network (layers 4,3,2) on the
    input 0.1,0.4,0.2,0.3 and writes the trace to neuralNetwork.json.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(run_command)


@cli.command(name="run")
@click.option(
    "--layers",
    "-l",
    type=str,
    callback=_parse_int_list,
    help="Comma-separated neuron count per layer [default: 4,3,2]",
)
@click.option(
    "--default-network",
    is_flag=True,
    help=f"Use the default architecture ({','.join(str(n) for n in DEFAULT_LAYER_SIZES)})",
)
@click.option(
    "--input",
    "-i",
    "input_values",
    type=str,
    callback=_parse_float_list,
    help="Comma-separated input vector, as long as the first layer [default: 0.1,0.4,0.2,0.3]",
)
@click.option("--seed", "-s", type=int, default=None, help="Seed for weight initialization [default: random]")
@click.option(
    "--output",
    "-o",
    type=str,
    help="Output file for the trace record [default: neuralNetwork.json]",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(list(SUPPORTED_FORMATS)),
    default=None,
    help="Output format [default: from the output file suffix]",
)
@click.option("--no-save", is_flag=True, help="Do not write the trace record")
@click.option("--show-trace", is_flag=True, help="Print every layer's output, not just the final one")
@click.option(
    "--delay",
    type=click.IntRange(min=0),
    default=None,
    help="Milliseconds between printed characters, 0 to disable [default: 33]",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="TOML configuration file [default: .feedforward.toml or pyproject.toml]",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output with detailed logging")
def run_command(
    layers: Optional[list[int]] = None,
    default_network: bool = False,
    input_values: Optional[list[float]] = None,
    seed: Optional[int] = None,
    output: Optional[str] = None,
    fmt: Optional[str] = None,
    no_save: bool = False,
    show_trace: bool = False,
    delay: Optional[int] = None,
    config_path: Optional[str] = None,
    verbose: bool = False,
) -> None:
    """Build a network, run one forward pass and save the trace record.

    \b
    Usage:
        feedforward run
        feedforward run --layers 4,3,2 --input 0.1,0.4,0.2,0.3
        feedforward run --default-network --input 0.1,0.3,0.2
        feedforward run --seed 42 --output trace.yaml

    The first layer reads an input vector as long as the layer itself, so
    ``--input`` must have as many values as the first ``--layers`` entry.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")

    config = FeedforwardConfig.load(Path(config_path)) if config_path else get_config()

    if default_network and layers:
        click.echo("Error: --layers and --default-network cannot be combined", err=True)
        sys.exit(1)

    if default_network:
        layer_sizes = None
        inputs = input_values if input_values is not None else DEFAULT_NETWORK_INPUT
    else:
        layer_sizes = layers if layers is not None else config.layers
        inputs = input_values if input_values is not None else config.input

    seed = seed if seed is not None else config.seed
    delay_ms = delay if delay is not None else config.delay_ms
    target = None if no_save else (output or config.output)
    # A configured format only applies to the configured output file
    if fmt is None and output is None:
        fmt = config.format

    paced_echo("Starting Neural Network...", delay_ms)

    # Only animate on an interactive terminal
    spinner = None
    if sys.stdout.isatty():
        spinner = yaspin(Spinners.dots, text="Running forward propagation")
        spinner.start()

    try:
        result = run_forward_pass(layer_sizes, inputs, seed=seed, output=target, fmt=fmt)
    except FeedforwardError as e:
        if spinner:
            spinner.fail(click.style("Failed", fg="red", bold=True))
        logger.debug(f"Forward pass rejected: {e!s}")
        click.echo(f"Error: {e!s}", err=True)
        sys.exit(determine_exit_code(None))

    if spinner:
        if result.error is not None:
            spinner.fail(click.style("Forward pass done, save failed", fg="yellow", bold=True))
        else:
            spinner.ok(click.style("Done", fg="green", bold=True))

    _print_result(result, show_trace, delay_ms)
    sys.exit(determine_exit_code(result))


def _print_result(result: RunResult, show_trace: bool, delay_ms: int) -> None:
    """Print the forward pass outcome to the console"""
    if show_trace:
        click.echo(f"Input: {format_vector(result.trace[0])}")
        for index, vector in enumerate(result.trace[1:], 1):
            click.echo(f"Layer {index} output: {format_vector(vector)}")

    paced_echo("Output from forward propagation: ", delay_ms)
    click.echo(click.style(format_vector(result.final_output), fg="cyan"))

    if result.saved:
        click.echo(f"Results written to {result.output_path}")
    elif result.error is not None:
        click.echo(f"Error: {result.error!s}", err=True)


@cli.command(name="describe")
@click.option(
    "--layers",
    "-l",
    type=str,
    callback=_parse_int_list,
    help="Comma-separated neuron count per layer [default: 3,3,3]",
)
@click.option("--seed", "-s", type=int, default=None, help="Seed for weight initialization [default: random]")
@click.option("--show-parameters", is_flag=True, help="Print every neuron's weights and bias")
def describe_command(layers: Optional[list[int]], seed: Optional[int], show_parameters: bool) -> None:
    """Show a network's layers and parameter counts without running it."""
    try:
        network = Network(layers, seed=seed)
    except ArchitectureError as e:
        click.echo(f"Error: {e!s}", err=True)
        sys.exit(1)

    click.echo(click.style("Network architecture", fg="blue", bold=True))
    click.echo("=" * 40)
    click.echo(f"Layer sizes: {list(network.layer_sizes)}")
    click.echo(f"Input size: {network.input_size}")
    click.echo(f"Output size: {network.output_size}")
    for line in network.describe():
        click.echo(f"  {line}")
    click.echo(f"Total parameters: {network.parameter_count}")

    if show_parameters:
        for layer_index, layer in enumerate(network.layers, 1):
            click.echo(f"\nLayer {layer_index}:")
            for neuron_index, neuron in enumerate(layer.neurons, 1):
                click.echo(f"  Neuron {neuron_index}: weights={format_vector(neuron.weights, 4)} bias={neuron.bias:.4f}")

    sys.exit(0)


def main() -> None:
    """Main entry point"""
    cli()


if __name__ == "__main__":
    cli()
