"""CLI entrypoint rendering client data of a saved search reply as text."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from clientdata.config import RenderSettings
from clientdata.errors import ClientDataError
from clientdata.extractors.xml_extractor import XmlClientDataExtractor
from clientdata.manager import ClientDataManager

load_dotenv()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract text from client data of a JSON search reply")
    parser.add_argument("--reply", required=True, help="Path to a JSON reply holding a clientData list")
    parser.add_argument("--id", dest="client_data_id", help="Client data id to render")
    parser.add_argument("--name", default=None, help="XPath (XML) or field name (JSON) to extract")
    parser.add_argument("--plain", action="store_true", help="Render highlighted fragments without markup")
    parser.add_argument("--list", action="store_true", help="List available client data ids and exit")
    args = parser.parse_args(argv)

    settings = RenderSettings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.logging_level,
    )

    try:
        reply = json.loads(Path(args.reply).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"error: cannot read reply {args.reply}: {exc}", file=sys.stderr)
        return 1

    try:
        manager = ClientDataManager.from_reply(reply)
        if args.list:
            print(json.dumps({"ids": manager.ids}, ensure_ascii=True, indent=2))
            return 0
        if args.client_data_id is None:
            parser.error("--id is required unless --list is given")

        extractor = manager.extractor(args.client_data_id)
        if isinstance(extractor, XmlClientDataExtractor):
            formatter = settings.highlight_formatter(plain=args.plain)
        else:
            formatter = settings.text_visitor(plain=args.plain)
        text = manager.get_text(args.client_data_id, args.name, formatter)
    except ClientDataError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    payload = {
        "id": args.client_data_id,
        "name": args.name,
        "text": text,
    }
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
