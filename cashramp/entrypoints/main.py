from loguru import logger

from cashramp.application.cashramp_service import CashrampService
from cashramp.infrastructure.cashramp_client import initialise_client


def main() -> None:
    # Environment and secret come from CASHRAMP_ENV / CASHRAMP_SECRET_KEY (or .env).
    with initialise_client() as client:
        service = CashrampService(client)
        logger.info(f"Using Cashramp API at {client.api_url}")

        countries = service.get_available_countries() or []
        logger.info(f"{len(countries)} available country(ies): {', '.join(c.code for c in countries)}")

        limits = service.get_ramp_limits()
        if limits is not None:
            logger.info(
                f"Deposit limits: {limits.minimum_deposit_usd}–{limits.maximum_deposit_usd} USD, "
                f"daily limit {limits.daily_limit_usd} USD"
            )

        account = service.get_account()
        if account is not None:
            logger.info(f"Account {account.id} balance: {account.account_balance}")


if __name__ == "__main__":
    main()
