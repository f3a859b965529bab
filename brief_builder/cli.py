import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import load_config
from .logger import LOGGER_NAME, setup_logger
from .pipeline import iterate_content_steps, load_profile, synthesize_structure
from .render import render_markdown, step_to_dict, structure_to_dict

# python -m 実行時も brief_builder ロガーの配下
LOGGER = logging.getLogger(f"{LOGGER_NAME}.cli")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="構成作成くん - SERP分析JSONから記事構成案を生成")
    parser.add_argument("--input", required=True, help="SERP分析JSONファイル（- で標準入力）")
    parser.add_argument("--output", help="結果を書き出すファイルパス")
    parser.add_argument(
        "--format", choices=("json", "markdown"), default="json", help="出力形式 (json / markdown)"
    )
    parser.add_argument("--steps", action="store_true", help="本文生成ステップも出力する（JSONのみ）")
    parser.add_argument("--log-file", help="ログの書き出し先")
    parser.add_argument("--verbose", action="store_true", help="詳細ログを表示する")
    args = parser.parse_args(argv)

    load_dotenv()
    logger = setup_logger(Path(args.log_file) if args.log_file else None)
    logger.setLevel(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config()
        profile = load_profile(_read_input(args.input))
    except (ValueError, OSError) as exc:
        LOGGER.error(str(exc))
        raise SystemExit(1) from exc

    structure = synthesize_structure(profile, config)

    if args.format == "markdown":
        text = render_markdown(structure)
    else:
        result = structure_to_dict(structure)
        if args.steps:
            result["steps"] = [
                step_to_dict(step) for step in iterate_content_steps(profile, structure, config)
            ]
        text = json.dumps(result, ensure_ascii=False, indent=2)

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        LOGGER.info("構成案を書き出しました: %s", args.output)
    else:
        print(text)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


if __name__ == "__main__":
    main()
