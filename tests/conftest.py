"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from property_analysis.calculations import AnalysisInput


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def sample_input():
    """20%-down single-family rental used across the engine tests."""
    return AnalysisInput(
        purchase_price=150000,
        down_payment=30000,
        interest_rate=7.5,
        loan_term=30,
        closing_costs=3000,
        pmi_rate=0,
        gross_rent=1500,
        vacancy_rate=0.05,
        property_taxes=1800,
        insurance=800,
        property_mgmt=150,
        maintenance=100,
        utilities=0,
        hoa_fees=0,
        equipment=50,
        rehab_costs=0,
    )
