from seed.cli import seed

seed()
