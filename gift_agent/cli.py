from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from config import SETTINGS_PATH
from gift_agent.models import GenerationResult
from gift_agent.services import (
    ProfileService,
    ProfileValidationError,
    RecommendationError,
    RecommendationService,
    SettingsStore,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Suggest gifts for a recipient via an OpenAI-compatible chat completion endpoint."
    )
    parser.add_argument("--gender", required=True, help="Recipient gender: 男/女 or male/female")
    parser.add_argument("--age", required=True, help="Recipient age (1-120)")
    parser.add_argument("--interests", default="", help="Optional interests, e.g. '阅读、咖啡'")
    parser.add_argument("--budget-min", required=True, help="Minimum budget in yuan")
    parser.add_argument("--budget-max", required=True, help="Maximum budget in yuan")

    parser.add_argument("--api-url", help="Override the saved endpoint URL")
    parser.add_argument("--api-key", help="Override the saved API key")
    parser.add_argument("--model", help="Override the saved model")
    parser.add_argument(
        "--settings",
        type=Path,
        default=SETTINGS_PATH,
        help=f"Settings file (default: {SETTINGS_PATH})",
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Persist --api-url/--api-key/--model to the settings file",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=1,
        help="Number of batches; extra rounds regenerate with the same profile (default: 1)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def print_result(result: GenerationResult) -> None:
    if result.is_empty:
        print("⚠️ 未能解析礼物推荐，请检查API返回格式")
        print("API返回内容:")
        print(result.reply_text)
        return
    print("🎁 推荐礼物")
    for index, gift in enumerate(result.suggestions, start=1):
        print(f"  {index}. {gift.name} - {gift.feature}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.rounds < 1:
        raise SystemExit("--rounds must be at least 1")

    store = SettingsStore(args.settings)
    config = store.load_or_default().with_updates(
        url=args.api_url,
        api_key=args.api_key,
        model=args.model,
    )
    if args.save_config:
        store.save(config)
        print(f"✅ API配置已保存到 {store.path}")

    try:
        profile = ProfileService().from_form(
            {
                "gender": args.gender,
                "age": args.age,
                "interests": args.interests,
                "budgetMin": args.budget_min,
                "budgetMax": args.budget_max,
            }
        )
    except ProfileValidationError as e:
        raise SystemExit(f"❌ {e}")

    service = RecommendationService()
    try:
        for round_number in range(args.rounds):
            if round_number == 0:
                result = service.generate(profile, config)
            else:
                print()
                print("🔄 换一批")
                result = service.regenerate(config)
            print_result(result)
    except RecommendationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
