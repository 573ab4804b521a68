from dataclasses import dataclass

from dynaconf import Dynaconf

from undigraph.config.constants import DEFAULTS
from undigraph.config.settings import StoreConfig, UndigraphConfig

settings = Dynaconf(
    envvar_prefix="UNDIGRAPH",
    load_dotenv=True,
    settings_files=[],
)
for _key, _value in DEFAULTS.items():
    # environment overrides win over the built-in defaults
    if settings.get(_key) is None:
        settings.set(_key, _value)


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def build_store_config(source: Dynaconf) -> StoreConfig:
    return StoreConfig(
        removal_strategy=source.get(
            "REMOVAL_STRATEGY", DEFAULTS["REMOVAL_STRATEGY"]
        ),
        verify_invariants=_parse_bool(
            source.get("VERIFY_INVARIANTS", DEFAULTS["VERIFY_INVARIANTS"])
        ),
        default_name=str(source.get("GRAPH_NAME", DEFAULTS["GRAPH_NAME"])),
    )


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    log_level: str = settings.get("LOG_LEVEL", "INFO")

    # ---------------- Store Policy ----------------
    undigraph: UndigraphConfig = UndigraphConfig(
        store=build_store_config(settings),
        log_level=settings.get("LOG_LEVEL", "INFO"),
    )
