"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that prompts on-the-fly for whichever
arguments were not given on the command line, including the option that none are given. Keys and messages are
plain integers, nothing is read from or written to files.

Typical usage example:

    rsamath
    OR
    python -m rsamath -n --seed 7 keygen
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import sys
import typing

import rsamath
from rsamath import keygen
from rsamath import randomness


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in RSA Math.",
            choices=["keygen", "encrypt", "decrypt", "check-prime", "gen-prime"],
        ),
    "keygen":
        HelpData("Key pair generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "check-prime":
        HelpData("Probabilistic primality check."),
    "gen-prime":
        HelpData("Random prime generation."),
    "exponent":
        HelpData(
            description="Key exponent, e for encryption or d for decryption.",
            format=int,
        ),
    "modulus":
        HelpData(
            description="Key modulus n.",
            format=int,
        ),
    "message":
        HelpData(
            description="Integer message representative, in range [0, n-1].",
            format=int,
        ),
    "number":
        HelpData(
            description="The number to test for primality.",
            format=int,
        ),
    "prime_low":
        HelpData(
            description="Inclusive lower bound for random primes.",
            format=int,
            advanced=True,
            default=keygen.PRIME_LOW,
        ),
    "prime_high":
        HelpData(
            description="Exclusive upper bound for random primes.",
            format=int,
            advanced=True,
            default=keygen.PRIME_HIGH,
        ),
}

needs = {
    "keygen": ("prime_low", "prime_high"),
    "encrypt": ("exponent", "modulus", "message"),
    "decrypt": ("exponent", "modulus", "message"),
    "check-prime": ("number",),
    "gen-prime": ("prime_low", "prime_high"),
}

keyparts = argparse.ArgumentParser(add_help=False)
keyparts.add_argument("--exponent", "-E", type=help_dict["exponent"].format, help=help_dict["exponent"].description)
keyparts.add_argument("--modulus", "-N", type=help_dict["modulus"].format, help=help_dict["modulus"].description)
keyparts.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
primerange = argparse.ArgumentParser(add_help=False)
primerange.add_argument("--prime-low", type=help_dict["prime_low"].format, help=help_dict["prime_low"].description)
primerange.add_argument("--prime-high", type=help_dict["prime_high"].format, help=help_dict["prime_high"].description)
corep = argparse.ArgumentParser(prog="rsamath")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsamath.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--seed", type=int, help="Seed the random source for reproducible output")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

commands.add_parser("keygen", parents=[primerange], help=help_dict["keygen"].description)
commands.add_parser("encrypt", parents=[keyparts], help=help_dict["encrypt"].description)
commands.add_parser("decrypt", parents=[keyparts], help=help_dict["decrypt"].description)
checkp = commands.add_parser("check-prime", help=help_dict["check-prime"].description)
checkp.add_argument("--number", "-x", type=help_dict["number"].format, help=help_dict["number"].description)
commands.add_parser("gen-prime", parents=[primerange], help=help_dict["gen-prime"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to RSA Math!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    rng = randomness.SeededRandomSource(args.seed) if args.seed is not None else None
    match args.subcommand:
        case "keygen":
            config = keygen.KeyGenConfig(prime_low=args.prime_low, prime_high=args.prime_high)
            sk, pk = rsamath.generate(config, rng)
            pspr("Public key (e, n):")
            print(f"{pk.expo} {pk.mod}")
            pspr("Private key (d, n):")
            print(f"{sk.expo} {sk.mod}")
        case "encrypt":
            ciph = rsamath.encrypt(rsamath.RSAPubKey(args.exponent, args.modulus), args.message)
            pspr("Ciphertext:")
            print(ciph)
        case "decrypt":
            clear = rsamath.decrypt(rsamath.RSAPrivKey(args.exponent, args.modulus), args.message)
            pspr("Cleartext:")
            print(clear)
        case "check-prime":
            if rsamath.is_prime(args.number, rng=rng):
                print(f"{args.number} is probably prime.")
            else:
                print(f"{args.number} is composite.")
                sys.exit(1)
        case "gen-prime":
            print(rsamath.gen_prime(args.prime_low, args.prime_high, rng))
    pspr("Thank you for using RSA Math!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
