"""In-memory customer repository."""

from typing import Dict, List, Optional

from ooh_tracker.application.interfaces.repositories import CustomerRepositoryInterface
from ooh_tracker.domain.entities.customer import Customer


class InMemoryCustomerRepository(CustomerRepositoryInterface):
    """Customer directory held in memory."""

    def __init__(self):
        self.customers: Dict[int, Customer] = {}

    async def add(self, customer: Customer) -> Customer:
        if customer.id in self.customers:
            raise ValueError(f"Customer {customer.id} already exists")
        self.customers[customer.id] = customer
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        return self.customers.get(customer_id)

    async def get_by_name(self, name: str) -> Optional[Customer]:
        """Get customer by exact name; no case folding or fuzzy matching."""
        for customer in self.customers.values():
            if customer.name == name:
                return customer
        return None

    async def list_all(self) -> List[Customer]:
        return list(self.customers.values())
