"""Command-line interface for ocenv."""

import argparse
import logging
import os
import sys

from ocenv import __version__
from ocenv.completion import FLAGS, complete
from ocenv.config import load_config
from ocenv.errors import OcEnvError
from ocenv.models import SessionOptions
from ocenv.session import SessionRunner

log = logging.getLogger("ocenv")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ocenv",
        description="Start a shell in an isolated per-cluster OpenShift environment",
        add_help=False,
    )
    for flag in FLAGS:
        if flag.action == "help":
            parser.add_argument(*flag.names(), action="help", help=flag.description)
            continue
        if flag.action == "version":
            parser.add_argument(
                *flag.names(),
                action="version",
                version=f"%(prog)s {__version__}",
                help=flag.description,
            )
            continue
        kwargs: dict = {"dest": flag.dest, "help": flag.description}
        if flag.takes_value:
            kwargs["default"] = None if flag.choices else ""
            if flag.metavar:
                kwargs["metavar"] = flag.metavar
            if flag.choices:
                kwargs["choices"] = flag.choices
        else:
            kwargs["action"] = "store_true"
        parser.add_argument(*flag.names(), **kwargs)
    parser.add_argument(
        "alias",
        nargs="?",
        default="",
        help="Environment name (defaults to the cluster ID)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    completion_code = complete(args_list, os.environ)
    if completion_code is not None:
        return completion_code

    parser = build_parser()
    args = parser.parse_args(args_list)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    options = SessionOptions(
        alias=args.alias,
        cluster_id=args.cluster_id,
        login_script=args.login_script,
        username=args.username,
        password=args.password,
        api_url=args.api_url,
        reset=args.reset,
        temp=args.temp,
        delete=args.delete,
        export_kubeconfig=args.export_kubeconfig,
        activation=args.activation,
    )

    try:
        options.validate()
        log.debug("alias=%s cluster_id=%s", options.alias, options.cluster_id)
        config = load_config()
        runner = SessionRunner(options, config)
        return runner.run()
    except (OcEnvError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def entrypoint() -> None:
    raise SystemExit(main())
