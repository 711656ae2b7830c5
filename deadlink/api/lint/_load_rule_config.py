from ..config.DeadLinkConfig import DeadLinkConfig


def _load_rule_config(
    check_relative: bool | None = None,
    base_uri: str | None = None,
    ignore: list[str] | None = None,
) -> DeadLinkConfig:
    """Load the config file and apply command-line overrides to its rule section."""
    config = DeadLinkConfig.load()

    overrides: dict = {}
    if check_relative is not None:
        overrides["check_relative"] = check_relative
    if base_uri is not None:
        overrides["base_uri"] = base_uri
    if ignore:
        overrides["ignore"] = [*config.rule.ignore, *ignore]

    if overrides:
        config = config.model_copy(update={"rule": config.rule.model_copy(update=overrides)})
    return config
