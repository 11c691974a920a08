from datetime import timedelta

import pytest

from freightquote.core.enums import DestinationCountry
from freightquote.core.exceptions import QuoteValidationError, RateCalculationError
from freightquote.core.units import IN_TO_CM, LB_TO_KG
from freightquote.services.quote_service import (
    QUOTE_DISCLAIMERS,
    QuoteService,
    chargeable_weight_kg,
    get_eligibility_warnings,
)
from freightquote.services.shipping.lanes import Lane
from tests.mocks import MockCarrier

JAMAICA_LANE = Lane("JFK", "KIN", DestinationCountry.JAMAICA, 1, 100)


"""
1. Quote creation
"""

@pytest.mark.asyncio
async def test_create_quote_for_guyana(guyana_payload):
    quote = await QuoteService().create_quote(guyana_payload)

    assert quote.id.startswith("quote_")
    assert len(quote.id) == len("quote_") + 16
    assert len(quote.rates) == 1
    assert quote.rates[0].carrier == "Caribbean Airlines"
    assert quote.warnings == []
    assert quote.disclaimers == QUOTE_DISCLAIMERS


@pytest.mark.asyncio
async def test_quote_keeps_input_in_display_units(guyana_payload):
    quote = await QuoteService().create_quote(guyana_payload)

    assert quote.input.pieces[0].weight == 10
    assert quote.input.dest_country == DestinationCountry.GUYANA


@pytest.mark.asyncio
async def test_quote_expires_after_validity_window(guyana_payload):
    quote = await QuoteService().create_quote(guyana_payload)
    assert quote.expires_at - quote.created_at == timedelta(hours=24)


@pytest.mark.asyncio
async def test_quote_ids_are_unique(guyana_payload):
    service = QuoteService()
    first = await service.create_quote(guyana_payload)
    second = await service.create_quote(guyana_payload)
    assert first.id != second.id


@pytest.mark.asyncio
async def test_quote_with_no_rates_is_still_a_quote(make_payload):
    service = QuoteService(carriers=[MockCarrier(lanes=[JAMAICA_LANE])])

    quote = await service.create_quote(make_payload(destCountry="Barbados"))

    assert quote.rates == []
    assert quote.warnings == []


"""
2. Eligibility warnings
"""

@pytest.mark.asyncio
async def test_heavy_piece_gets_weight_warning(make_payload):
    quote = await QuoteService().create_quote(make_payload(pieces=[{"type": "box", "weight": 60}]))
    assert quote.eligibility_warnings == ["One or more pieces exceed JetPak weight limit (50 lbs)"]


def test_fifty_pounds_is_within_weight_limit(metric_request):
    assert get_eligibility_warnings(metric_request(pieces=[{"type": "box", "weight": 50}])) == []


def test_oversized_piece_gets_dimension_warning(metric_request):
    request = metric_request(pieces=[
        {"type": "box", "weight": 10, "dimensions": {"length": 30, "width": 20, "height": 20}},
        {"type": "box", "weight": 10, "dimensions": {"length": 30, "width": 20, "height": 20}},
    ])

    assert get_eligibility_warnings(request) == [
        "One or more pieces exceed JetPak dimension limits (62 inches total)"
    ]


def test_both_warnings(metric_request):
    request = metric_request(pieces=[
        {"type": "barrel", "weight": 120, "dimensions": {"length": 24, "width": 24, "height": 36}},
    ])
    assert len(get_eligibility_warnings(request)) == 2


def test_small_piece_without_dimensions_has_no_warnings(metric_request):
    assert get_eligibility_warnings(metric_request()) == []


def test_chargeable_weight_uses_actual_without_dimensions(metric_request):
    assert chargeable_weight_kg(metric_request()) == round(10 * LB_TO_KG, 2)


def test_chargeable_weight_uses_volumetric_when_greater(metric_request):
    request = metric_request(pieces=[
        {"type": "barrel", "weight": 120, "dimensions": {"length": 24, "width": 24, "height": 36}},
        {"type": "box", "weight": 40, "dimensions": {"length": 5, "width": 5, "height": 5}},
    ])

    volumetric = (24 * IN_TO_CM) * (24 * IN_TO_CM) * (36 * IN_TO_CM) / 6000
    assert volumetric > 120 * LB_TO_KG
    assert chargeable_weight_kg(request) == round(volumetric + 40 * LB_TO_KG, 2)


@pytest.mark.asyncio
async def test_quote_reports_chargeable_weight(guyana_payload):
    quote = await QuoteService().create_quote(guyana_payload)
    assert quote.chargeable_weight_kg == round(10 * LB_TO_KG, 2)


@pytest.mark.asyncio
async def test_accessorials_flow_into_every_rate(make_payload):
    quote = await QuoteService().create_quote(make_payload(
        destCountry="Jamaica",
        packaging=["sku_econtainer_small"],
        storageDays=9,
    ))

    assert len(quote.rates) == 2
    for rate in quote.rates:
        assert rate.breakdown.packaging_fee == 45
        assert rate.breakdown.storage_fee == 5.0
        assert rate.breakdown.surcharge is None


"""
3. Failures
"""

@pytest.mark.asyncio
async def test_invalid_request_raises_validation_error(make_payload):
    carrier = MockCarrier(lanes=[JAMAICA_LANE])

    with pytest.raises(QuoteValidationError) as exc_info:
        await QuoteService(carriers=[carrier]).create_quote(make_payload(originZip="123"))

    assert exc_info.value.errors[0]["field"] == "originZip"
    assert carrier.fetch_calls == []


@pytest.mark.asyncio
async def test_carrier_failure_raises(guyana_payload):
    service = QuoteService(carriers=[MockCarrier(should_fail=True)], allow_partial=False)

    with pytest.raises(RateCalculationError):
        await service.create_quote(guyana_payload)


@pytest.mark.asyncio
async def test_partial_quote_carries_warnings(make_payload):
    service = QuoteService(
        carriers=[
            MockCarrier(lanes=[JAMAICA_LANE], name="Healthy Air"),
            MockCarrier(name="Broken Air", should_fail=True),
        ],
        allow_partial=True,
    )

    quote = await service.create_quote(make_payload(destCountry="Jamaica"))

    assert [rate.carrier for rate in quote.rates] == ["Healthy Air"]
    assert quote.warnings == ["Broken Air rates are currently unavailable"]


"""
4. Serialisation
"""

@pytest.mark.asyncio
async def test_quote_payload_uses_camel_case(guyana_payload):
    quote = await QuoteService().create_quote(guyana_payload)
    payload = quote.to_payload()

    assert {"id", "input", "rates", "createdAt", "expiresAt", "eligibilityWarnings", "disclaimers"} <= set(payload)
    rate = payload["rates"][0]
    assert rate["laneId"] == "cal-JFK-GEO"
    assert rate["totalPrice"] == 137.8
    assert rate["breakdown"]["fuelSurcharge"] == 14.4
    assert "afterHoursFee" not in rate["breakdown"]
    assert payload["input"]["originZip"] == "07001"
