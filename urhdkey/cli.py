#!/usr/bin/env python
#
# (c) Copyright 2021 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# To use this, install with:
#
#   pip install --editable '.[cli]'
#
# That will create the command "urhdkey" in your path.
#
#
import click, sys
from functools import wraps

from urhdkey.utils import B2A, A2B
from urhdkey.constants import NETWORK_TESTNET
from urhdkey.exceptions import URDecodeError
from urhdkey.coin_info import CoinInfo, KNOWN_NETWORKS
from urhdkey.key_path import KeyPath
from urhdkey.hd_key import HDKey
from urhdkey import __version__

# Cleanup display (supress traceback) for user-feedback exceptions
_sys_excepthook = sys.excepthook
def my_hook(ty, val, tb):
    if issubclass(ty, URDecodeError):
        print("FATAL: %s" % val, file=sys.stderr)
    else:
        return _sys_excepthook(ty, val, tb)
sys.excepthook=my_hook

def fail(msg):
    # show message and stop
    click.echo(f"FAILURE: {msg}", err=True)
    sys.exit(1)

def display_errors(f):
    # clean-up display of errors from bad input
    @wraps(f)
    def wrapper(*args, **kws):
        try:
            return f(*args, **kws)
        except URDecodeError as exc:
            fail(f"Cannot decode: {exc}")
        except ValueError as exc:
            fail(str(exc))
    return wrapper

def read_hdkey(hexdata):
    # CBOR (as hex) into an HDKey
    return HDKey.from_bytes(A2B(hexdata))

def dump_hdkey(hk):
    # one line per field that is present

    if hk.master is not None:
        click.echo('is_master: %s' % hk.is_master())
    if hk.private is not None:
        click.echo('is_private_key: %s' % hk.is_private_key())

    for fn in ['key', 'chain_code', 'parent_fingerprint']:
        v = getattr(hk, fn)
        if v is not None:
            click.echo('%s: %s' % (fn, B2A(v)))

    if hk.use_info is not None:
        ui = hk.use_info
        click.echo('use_info: coin_type=%d network=%s' % (ui.coin_type,
                        KNOWN_NETWORKS.get(ui.network, ui.network)))

    for fn in ['origin', 'children']:
        kp = getattr(hk, fn)
        if kp is None:
            continue
        ln = 'm/' + kp.path
        if kp.source_fingerprint is not None:
            ln = '[%s] %s' % (B2A(kp.source_fingerprint), ln)
        click.echo('%s: %s' % (fn, ln))

    for fn in ['name', 'note']:
        v = getattr(hk, fn)
        if v is not None:
            click.echo('%s: %s' % (fn, v))

# Accept any prefix of a command name.
#
# from <https://click.palletsprojects.com/en/8.0.x/advanced/?#command-aliases>
class AliasedGroup(click.Group):
    def get_command(self, ctx, cmd_name):
        rv = click.Group.get_command(self, ctx, cmd_name)
        if rv is not None:
            return rv
        matches = [x for x in self.list_commands(ctx)
                   if x.startswith(cmd_name)]
        if not matches:
            return None
        elif len(matches) == 1:
            return click.Group.get_command(self, ctx, matches[0])
        ctx.fail(f"Abiguous command. Pick one of: {' | '.join(sorted(matches))}")

    def resolve_command(self, ctx, args):
        # always return the full command name
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name, cmd, args


#
# Options we want for all commands
#
@click.group(cls=AliasedGroup)
@click.option('--verbose', '-v', is_flag=True, 
                    help="Show CBOR going in and out.")
@click.version_option(version=__version__)
def main(**kws):
    '''
    Read and write crypto-hdkey UR registry items (CBOR, as hex).

    Any distinct prefix works for all commands: "d" for "decode".
    '''
    import urhdkey.hd_key as hh
    hh.VERBOSE = kws.get('verbose', False)


@main.command('decode')
@click.argument('hexdata', type=str, metavar="A301F5...")
@display_errors
def decode_hdkey(hexdata):
    "Show all fields of a crypto-hdkey, and its BIP-32 form"

    hk = read_hdkey(hexdata)
    dump_hdkey(hk)
    click.echo('bip32: %s' % hk.bip32_key())

@main.command('xpub')
@click.argument('hexdata', type=str, metavar="A301F5...")
@display_errors
def get_xpub(hexdata):
    "Just the BIP-32 extended key (xpub/xprv) for a crypto-hdkey"

    click.echo(read_hdkey(hexdata).bip32_key())

@main.command('master')
@click.argument('key', type=str, metavar="KEY_HEX")
@click.argument('chain_code', type=str, metavar="CHAIN_CODE_HEX")
@display_errors
def make_master(key, chain_code):
    "Encode a master key (key + chain code) as crypto-hdkey"

    hk = HDKey.master_key(A2B(key), A2B(chain_code))
    click.echo(B2A(hk.to_bytes()).upper())

@main.command('extended')
@click.argument('key', type=str, metavar="KEY_HEX")
@click.option('--chain-code', '-c', type=str, metavar="HEX", default=None, help="Chain code (32 bytes)")
@click.option('--private/--public', default=None, help="Mark key as private or public (default: not stated)")
@click.option('--testnet', '-t', is_flag=True, help="Add coin info for bitcoin testnet")
@click.option('--origin', '-o', type=str, metavar="44h/0h/0h", default=None, help="Derivation path of this key")
@click.option('--children', type=str, metavar="0/*", default=None, help="Allowed further derivation")
@click.option('--parent-fp', '-p', type=str, metavar="HEX", default=None, help="Parent fingerprint (4 bytes)")
@click.option('--name', '-n', type=str, default=None, help="Short name for key")
@click.option('--note', type=str, default=None, help="Free text note")
@display_errors
def make_extended(key, chain_code, private, testnet, origin, children, parent_fp, name, note):
    "Encode a derived (non-master) key as crypto-hdkey"

    if parent_fp is not None:
        parent_fp = A2B(parent_fp)
        if len(parent_fp) != 4:
            fail("Parent fingerprint must be 4 bytes")

    hk = HDKey.extended_key(
            A2B(key),
            is_private_key=private,
            chain_code=A2B(chain_code) if chain_code else None,
            use_info=CoinInfo(network=NETWORK_TESTNET) if testnet else None,
            origin=KeyPath.from_path(origin) if origin is not None else None,
            children=KeyPath.from_path(children) if children is not None else None,
            parent_fingerprint=parent_fp,
            name=name,
            note=note)

    click.echo(B2A(hk.to_bytes()).upper())

# EOF
