"""Main CLI application for localnet genesis generation."""

import json
import logging
import sys

import click

from ..api import HealthClient
from ..crypto import generate_node_keys, load_node_keys
from ..errors import GenesisError, HealthClientError
from ..genesis import assemble_genesis
from ..models import GenesisDocument

logger = logging.getLogger(__name__)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(debug):
    """Localnet genesis CLI - bootstrap configuration for local test networks."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


@cli.group()
def genesis():
    """Create and inspect genesis documents."""
    pass


@genesis.command('create')
@click.option('--network-id', required=True, type=click.IntRange(0, 2**32 - 1), help='Network ID')
@click.option('--keys-dir', multiple=True, type=click.Path(exists=True, file_okay=False),
              help='Node staking directory (staker.key, staker.crt, signer.key); repeat in validator order')
@click.option('--generate', type=click.IntRange(min=0), help='Generate keys for this many validators')
@click.option('--start-time', type=int, help='Genesis Unix time (default: now)')
def genesis_create(network_id, keys_dir, generate, start_time):
    """Assemble a genesis and print it to stdout."""
    if keys_dir and generate is not None:
        raise click.UsageError("--keys-dir and --generate are mutually exclusive")

    if generate is not None:
        logger.info(f"Generating key material for {generate} validators")
        node_keys = [generate_node_keys() for _ in range(generate)]
    else:
        try:
            node_keys = [load_node_keys(d) for d in keys_dir]
        except OSError as e:
            raise click.ClickException(f"couldn't read node keys: {e}")

    try:
        data = assemble_genesis(network_id, node_keys, start_time=start_time)
    except GenesisError as e:
        raise click.ClickException(str(e))

    click.echo(data.decode('utf-8'))


@genesis.command('info')
@click.argument('path', type=click.File('rb'), default='-')
def genesis_info(path):
    """Display genesis information (reads stdin when PATH is omitted)."""
    try:
        document = GenesisDocument.from_json(path.read())
        cchain = document.embedded_chain()
    except ValueError as e:
        raise click.ClickException(f"invalid genesis: {e}")

    click.echo("=== Genesis Information ===\n")
    click.echo(f"Network ID:  {document.network_id}")
    click.echo(f"Start Time:  {document.start_time}")
    click.echo(f"Message:     {document.message}")
    click.echo(f"\nInitial Stakers ({len(document.initial_stakers)}):")
    for staker in document.initial_stakers:
        click.echo(f"  - {staker.node_id} (public key {staker.signer.public_key[:18]}...)")
    click.echo(f"\nAllocations ({len(document.allocations)}):")
    for alloc in document.allocations:
        click.echo(f"  - {alloc.avax_addr}: {alloc.total_amount} ({len(alloc.unlock_schedule)} tranches)")
    click.echo(f"\nStaked Funds: {', '.join(document.initial_staked_funds)}")
    click.echo(f"\nEmbedded Chain ID: {cchain.config.chain_id}")
    click.echo(f"Funded Addresses:  {', '.join(cchain.alloc)}")


@cli.command()
@click.option('--uri', default='http://127.0.0.1:9650', help='Node base URI')
@click.option('--kind', type=click.Choice(['health', 'readiness', 'liveness']), default='health',
              help='Health query to run')
@click.option('--tag', multiple=True, help='Restrict to checks with this tag')
@click.option('--timeout', default=10.0, help='Request timeout in seconds')
def health(uri, kind, tag, timeout):
    """Query a node's health API."""
    client = HealthClient(uri, timeout=timeout)
    try:
        reply = getattr(client, kind)(list(tag))
    except HealthClientError as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps(reply.model_dump(mode='json', by_alias=True), indent=2))
    if not reply.healthy:
        click.echo(f"✗ Unhealthy checks: {', '.join(reply.failing_checks()) or 'unknown'}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
