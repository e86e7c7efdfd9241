"""
Seed a development database with sample profiles, contracts and jobs.
Skips seeding when profiles already exist.
"""
import asyncio
from datetime import datetime, timezone

from jobpay.infrastructure.database.session import dispose_engine, get_session_factory, init_db
from jobpay.modules.accounts import CLIENT_ROLE, CONTRACTOR_ROLE, AccountService
from jobpay.modules.contracts import STATUS_IN_PROGRESS, STATUS_NEW, STATUS_TERMINATED, ContractService
from jobpay.modules.jobs import JobService

PROFILES = [
    ("Ada", "Moreau", "Architect", CLIENT_ROLE, 115_000),
    ("Bruno", "Keller", "Publisher", CLIENT_ROLE, 23_111),
    ("Chidi", "Okafor", "Restaurateur", CLIENT_ROLE, 45_100),
    ("Dana", "Ivers", "Musician", CLIENT_ROLE, 400),
    ("Eli", "Santos", "Programmer", CONTRACTOR_ROLE, 6_400),
    ("Farah", "Nasser", "Designer", CONTRACTOR_ROLE, 120_000),
    ("Gus", "Lindqvist", "Programmer", CONTRACTOR_ROLE, 31_400),
    ("Hana", "Ito", "Translator", CONTRACTOR_ROLE, 100),
]

# (client index, contractor index, status, [(description, price_cents, paid)])
CONTRACTS = [
    (0, 4, STATUS_TERMINATED, [("site survey", 20_000, True)]),
    (0, 5, STATUS_IN_PROGRESS, [("floor plan revisions", 20_100, False)]),
    (1, 6, STATUS_IN_PROGRESS, [("ebook conversion", 20_200, False), ("cover layout", 12_100, False)]),
    (2, 7, STATUS_IN_PROGRESS, [("menu translation", 20_000, False)]),
    (2, 4, STATUS_NEW, [("ordering app", 12_100, False)]),
    (3, 5, STATUS_IN_PROGRESS, [("album artwork", 2_100, False)]),
]


async def seed() -> None:
    await init_db()

    async with get_session_factory()() as db:
        accounts = AccountService.with_session(db)
        if await accounts.list_accounts():
            print("Profiles already exist, nothing to seed")
            return

        profiles = [
            await accounts.create_account(
                first_name=first,
                last_name=last,
                profession=profession,
                role=role,
                balance_cents=balance,
            )
            for first, last, profession, role, balance in PROFILES
        ]

        contracts = ContractService.with_session(db)
        jobs = JobService.with_session(db)
        for client_idx, contractor_idx, status, job_specs in CONTRACTS:
            contract = await contracts.create_contract(
                client=profiles[client_idx],
                contractor=profiles[contractor_idx],
                terms=f"{profiles[contractor_idx].profession} services for {profiles[client_idx].full_name}",
                status=status,
            )
            for description, price_cents, paid in job_specs:
                await jobs.create_job(
                    contract_id=contract.id,
                    description=description,
                    price_cents=price_cents,
                    paid_at=datetime.now(timezone.utc) if paid else None,
                )
        await db.commit()

        print(f"Seeded {len(profiles)} profiles and {len(CONTRACTS)} contracts")


async def main() -> None:
    try:
        await seed()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
