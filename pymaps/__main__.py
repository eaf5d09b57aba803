import logging
from typing import Annotated

import typer

from pymaps.configurations import ConfigurationError, Configurations
from pymaps.containers.errors import ContainerError
from pymaps.distribution import measure_distribution

logger = logging.getLogger(__name__)

app = typer.Typer(pretty_exceptions_enable=False)


def load_configurations(overrides: list[str] | None) -> Configurations:
    configurations = Configurations()
    for override in overrides or []:
        name, separator, value = override.partition("=")
        if not separator:
            raise typer.BadParameter(f"expected name=value, got '{override}'", param_hint="--config")
        try:
            configurations.set_value(name.strip(), value.strip())
        except ConfigurationError as e:
            raise typer.BadParameter(str(e), param_hint="--config") from e
    return configurations


def parse_seed(seed: str) -> int | str | None:
    if not seed:
        return None
    try:
        return int(seed)
    except ValueError:
        return seed


@app.command()
def distribution(
    buckets: Annotated[int | None, typer.Option(help="number of buckets in the table")] = None,
    keys: Annotated[int | None, typer.Option(help="number of random keys to insert")] = None,
    seed: Annotated[str | None, typer.Option(help="seed for the random key generator")] = None,
    config: Annotated[list[str] | None, typer.Option("--config", "-c", help="configuration override name=value")] = None,
    log_level: Annotated[str | None, typer.Option(help="logging level")] = None,
) -> None:
    configurations = load_configurations(config)
    try:
        if buckets is not None:
            configurations.set_value("distribution-buckets", str(buckets))
        if keys is not None:
            configurations.set_value("distribution-keys", str(keys))
        if seed is not None:
            configurations.set_value("distribution-seed", seed)
        if log_level is not None:
            configurations.set_value("log-level", log_level)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e)) from e

    logging.basicConfig(level=configurations.log_level)
    logger.debug("running with %r", configurations)

    try:
        result = measure_distribution(
            configurations.distribution_buckets,
            configurations.distribution_keys,
            parse_seed(configurations.distribution_seed),
        )
    except ContainerError as e:
        raise typer.BadParameter(e.message) from e

    for line in result.lines():
        typer.echo(line)


@app.command()
def config(
    pattern: Annotated[str, typer.Argument(help="glob pattern of configuration names")] = "*",
    override: Annotated[list[str] | None, typer.Option("--config", "-c", help="configuration override name=value")] = None,
) -> None:
    configurations = load_configurations(override)
    for name, value in sorted(configurations.info(configurations.get_names(pattern)).items()):
        typer.echo(f"{name} ({configurations.get_configuration_type(name)}) {value}")


if __name__ == "__main__":
    app()
