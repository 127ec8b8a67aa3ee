"""主程序入口 - 逐行读取RPN表达式并输出结果"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, CLI_CONFIG
from core import RPNEvaluator, format_trace

logger = logging.getLogger(__name__)


def run(reader, verbose=False, out=None, err=None):
    """
    逐行评估，单行失败不会中断整体
    Args:
        reader: 可迭代的文本行或字节行（字节行按UTF-8逐行解码）
        verbose: 是否输出每个token后的追踪
    Returns:
        出错的行数
    Raises:
        UnicodeDecodeError: 某一行不是合法UTF-8；之前的行已经输出
    """
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    def tracer(remaining, stack):
        print(format_trace(remaining, stack), file=out)

    calc = RPNEvaluator(verbose=verbose, tracer=tracer)
    failures = 0

    for line in reader:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        result = calc.try_evaluate(line.rstrip("\r\n"))
        if result.ok:
            print(result.value, file=out)
        else:
            failures += 1
            print(result.error.render(), file=err)

    logger.info(f"Finished: {failures} line(s) failed")
    return failures


def build_parser():
    parser = argparse.ArgumentParser(
        prog=CLI_CONFIG["prog"],
        description=CLI_CONFIG["description"]
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print remaining tokens and the stack after each token"
    )
    parser.add_argument(
        "formula_file",
        metavar="FILE",
        nargs="?",
        default=None,
        help="File with one RPN formula per line (default: standard input)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {CLI_CONFIG['version']}"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"],
        force=True
    )

    try:
        if args.formula_file:
            logger.info(f"Reading formulas from {args.formula_file}")
            with open(args.formula_file, "rb") as f:
                run(f, args.verbose)
        else:
            logger.info("Reading formulas from standard input")
            run(getattr(sys.stdin, "buffer", sys.stdin), args.verbose)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read input: {e!r}")
        print(f"IoError: {e}", file=sys.stderr)
        return 1

    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
