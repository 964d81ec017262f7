from __future__ import annotations

import argparse
import logging

from app.core.config import get_settings
from app.services.dispatch_service import BulkDispatcher
from app.services.sms_service import SmsSendError, build_sms_sender


def main() -> None:
    parser = argparse.ArgumentParser(description="Twilio SMS integration check")
    parser.add_argument("--to", nargs="+", required=True, metavar="PHONE", help="recipient number(s)")
    parser.add_argument("--message", default="Twilio integration check", help="message body")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] [%(name)s] %(message)s")
    settings = get_settings()
    sender = build_sms_sender(settings)

    if len(args.to) == 1:
        try:
            sender.send(args.to[0], args.message)
        except SmsSendError as exc:
            print("send failed:", exc)
            raise SystemExit(1) from exc
        print("sent:", args.to[0])
        return

    result = BulkDispatcher(sender, max_concurrency=settings.sms_max_concurrency).dispatch(
        args.to, args.message
    )
    print("sent:", ", ".join(result.sent) or "-")
    print("failed:", ", ".join(result.failed) or "-")
    print("total:", result.total)
    if result.failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
