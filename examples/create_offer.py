"""Example creating an offer and reporting how far it got."""
import sys

from skinvend_sdk import SkinVend, SkinVendSDKError


def main(deposit_id: str, trade_url: str) -> None:
    with SkinVend.from_env() as client:
        try:
            offer = client.create_offer(deposit_id, trade_url=trade_url)
        except SkinVendSDKError as exc:
            details = exc.details or {}
            print("Offer failed at step:", details.get("step", "unknown"))
            partial = details.get("offer")
            if partial is not None and partial.deposit_succeeded:
                print("Deposit was registered with trade_id", partial.trade_id)
            print(exc.message)
            return

        print("Offer status:", offer.status.value)
        print("Trade:", offer.trade)


if __name__ == "__main__":  # pragma: no cover - manual usage
    main(sys.argv[1], sys.argv[2])
