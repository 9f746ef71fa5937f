"""
Pytest configuration for Solana API tests
"""
import pytest
from fastapi.testclient import TestClient
from solders.keypair import Keypair

from solana_api.main import app

# Mainnet USDC mint, used wherever any valid address will do
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


@pytest.fixture
def client():
    """Create a TestClient instance for testing the API"""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def keypair() -> Keypair:
    """A fresh signing keypair"""
    return Keypair()


@pytest.fixture
def sample_addresses():
    """Distinct valid addresses for instruction tests"""
    return {
        "mint": USDC_MINT,
        "authority": str(Keypair().pubkey()),
        "destination": str(Keypair().pubkey()),
        "owner": str(Keypair().pubkey()),
    }
