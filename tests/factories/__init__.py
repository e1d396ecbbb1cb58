"""Factory Boy setup for test data generation."""

from __future__ import annotations

import factory
from faker import Faker

Faker.seed(1234)


class PayloadFactory(factory.Factory):
    """Base factory for JSON request bodies sent to the service.

    Subclasses declare ``model = dict`` themselves so each keeps its own
    sequence counter.
    """

    class Meta:
        abstract = True
