"""CLI entry point for chat-bridge."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from chat_bridge import __version__


@click.command()
@click.argument('prompt', required=False)
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '-k',
    '--api-key',
    default=None,
    help='API key (overrides config and environment).',
)
@click.option(
    '--reply',
    'reply_only',
    is_flag=True,
    default=False,
    help='Print only the reply text instead of the raw JSON response.',
)
@click.option(
    '--log-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for cb_debug.log.',
)
@click.version_option(version=__version__)
def cli(prompt, config_path, api_key, reply_only, log_dir):
    """chat-bridge -- send a prompt to a chat-completion endpoint, or chat interactively.

    With PROMPT, sends it once and prints the raw JSON response. Without, opens the chat TUI.
    """
    from chat_bridge.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from chat_bridge.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
        resolve_log_dir,
    )
    from chat_bridge.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: httpx not loaded on --help
        DependencyContainer,
    )
    from chat_bridge.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    try:
        overrides: dict = {}
        if log_dir:
            overrides['logging'] = {'directory': log_dir}
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    setup_file_logging(Path(resolve_log_dir(config)), config.logging.level)

    container = DependencyContainer(config, api_key=api_key)
    if not container.api_key:
        click.echo(
            f'Warning: no API key (set {config.credential.api_key_env} or pass --api-key). '
            'The request will be sent unauthenticated.',
            err=True,
        )

    if prompt is not None:
        from chat_bridge.l4_frameworks_and_drivers.ask_runner import (  # noqa: PLC0415 -- deferred: one-shot mode only
            run_ask,
        )

        run_ask(container.bridge, prompt, container.api_key, reply_only=reply_only)
        return

    from chat_bridge.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for one-shot or --help
        ChatApp,
    )

    ChatApp(controller=container.controller).run()
