from .mock_carrier import MockCarrier
