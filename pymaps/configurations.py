import fnmatch
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Literal, TypeVar, dataclass_transform


class ConfigurationError(Exception):
    pass


@dataclass
class ConfigurationFieldData:
    type_: Literal["string", "integer", "log-level"] = "string"
    alias: str | None = None
    minimum: int | None = None
    _name: str | None = None
    _field_name: str | None = None

    @property
    def name(self) -> str:
        if self._name is None:
            raise ValueError()
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def field_name(self) -> str:
        if self._field_name is None:
            raise ValueError()
        return self._field_name

    @field_name.setter
    def field_name(self, value: str) -> None:
        self._field_name = value


def configuration(
    default: int | str,
    type_: Literal["string", "integer", "log-level"] = "string",
    alias: str | None = None,
    minimum: int | None = None,
) -> Any:  # noqa:ANN401
    return field(
        default=default,
        metadata={
            "configuration": ConfigurationFieldData(type_, alias, minimum),
        },
    )


@dataclass_transform()
@dataclass
class ConfigurationBase:
    FIELD_BY_NAME: ClassVar[dict[str, ConfigurationFieldData]] = {}
    CONFIGURATIONS_NAMES: ClassVar[list[str]] = []


ConfigurationType = TypeVar("ConfigurationType", bound=ConfigurationBase)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def configurations(cls: type[ConfigurationType]) -> type[ConfigurationType]:
    cls = dataclass(cls)
    field_by_name: dict[str, ConfigurationFieldData] = {}

    for f in fields(cls):
        field_data = f.metadata.get("configuration")
        if field_data is None:
            continue

        field_data.field_name = f.name
        if field_data._name is None:
            field_data.name = f.name.replace("_", "-")

        for name in filter(None, (field_data.name, field_data.alias)):
            if name in field_by_name:
                raise ValueError(f"configuration name '{name}' is registered twice")
            field_by_name[name] = field_data

    cls.FIELD_BY_NAME = field_by_name
    cls.CONFIGURATIONS_NAMES = list(field_by_name)
    return cls


@configurations
class Configurations(ConfigurationBase):
    distribution_buckets: int = configuration(default=37, type_="integer", minimum=1, alias="buckets")
    distribution_keys: int = configuration(default=10_000, type_="integer", minimum=0)
    distribution_seed: str = configuration(default="")

    log_level: str = configuration(default="WARNING", type_="log-level")

    @classmethod
    def get_field_name(cls, name: str) -> str:
        if name not in cls.FIELD_BY_NAME:
            raise ConfigurationError(f"unknown configuration '{name}'")
        return cls.FIELD_BY_NAME[name].field_name

    @classmethod
    def get_configuration_type(cls, name: str) -> str:
        if name in cls.FIELD_BY_NAME:
            return cls.FIELD_BY_NAME[name].type_
        return ""

    def set_value(self, name: str, value: str) -> None:
        field_name = self.get_field_name(name)
        field_data = self.FIELD_BY_NAME[name]

        if field_data.type_ == "integer":
            try:
                parsed = int(value)
            except ValueError:
                raise ConfigurationError(f"argument of '{name}' must be an integer, got '{value}'") from None
            if field_data.minimum is not None and parsed < field_data.minimum:
                raise ConfigurationError(f"argument of '{name}' must be at least {field_data.minimum}")
            setattr(self, field_name, parsed)
        elif field_data.type_ == "log-level":
            level = value.upper()
            if level not in LOG_LEVELS:
                raise ConfigurationError(f"argument of '{name}' must be one of {', '.join(LOG_LEVELS)}")
            setattr(self, field_name, level)
        else:
            setattr(self, field_name, value)

    def get_names(self, *patterns: str) -> set[str]:
        names: set[str] = set()
        for pattern in patterns:
            names.update(fnmatch.filter(self.CONFIGURATIONS_NAMES, pattern))
        return names

    def info(self, names: set[str]) -> dict[str, int | str]:
        info = {}
        for name in names:
            if name not in self.FIELD_BY_NAME:
                continue
            f = self.FIELD_BY_NAME[name]
            info[name] = getattr(self, f.field_name)
        return info
