"""Audio command implementations."""

import time

import click

from simonpad.audio import AudioDevice, SilentAudioOutput, create_audio_output
from simonpad.cli.context import fail, load_config
from simonpad.exceptions import AudioBackendUnavailableError
from simonpad.models import PadColor


@click.group(name="audio")
def audio_group():
    """Audio device commands."""
    pass


@audio_group.command(name="list")
def list_audio():
    """List available audio output devices."""
    try:
        devices = AudioDevice.list_output_devices()
        default_device_id = AudioDevice.get_default_device()
    except AudioBackendUnavailableError as e:
        fail(e)

    if not devices:
        click.echo("No audio output devices found.")
        return

    click.echo("Available audio output devices:\n")
    for device_id, name, host_api in devices:
        if device_id == default_device_id:
            click.echo(f"[{device_id}] {name}  [Default]")
        else:
            click.echo(f"[{device_id}] {name}")
        click.echo(f"    Host API: {host_api}")


@audio_group.command(name="test")
@click.option(
    "--pad",
    "pads",
    type=click.Choice([c.value for c in PadColor], case_sensitive=False),
    multiple=True,
    help="Pad to play (repeatable, default: all pads)",
)
@click.option("--no-error", is_flag=True, help="Skip the game-over cue")
@click.pass_context
def test_audio(ctx: click.Context, pads: tuple[str, ...], no_error: bool):
    """Play the pad sounds and the game-over cue."""
    config = load_config(ctx)
    output = create_audio_output(config)

    if isinstance(output, SilentAudioOutput):
        click.echo("[FAIL] No audio output available (see the log for details)", err=True)
        raise SystemExit(1)

    click.echo(f"Using {type(output).__name__}")
    for color in [PadColor(p.lower()) for p in pads] or list(PadColor):
        click.echo(f"  {color.value}")
        output.play_pad(color)
        time.sleep(0.5)

    if not no_error:
        click.echo("  game over")
        output.play_error()
        time.sleep(0.5)

    click.echo("[OK] Done")
