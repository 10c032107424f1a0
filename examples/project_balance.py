"""Example reading the project balance with the Python SDK.

Expects SKINVEND_API_KEY and SKINVEND_SECRET_KEY in the environment.
"""
from skinvend_sdk import SkinVend, SkinVendSDKError


def main() -> None:
    with SkinVend.from_env() as client:
        try:
            balance = client.get_project_balance()
        except SkinVendSDKError as exc:
            print("Request failed:", exc.code, exc.message)
            return

        print("API root:", client.api_root)
        print("Project balance:", balance)


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
