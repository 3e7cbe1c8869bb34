from variant_availability.config.options import AvailabilityOptions
from variant_availability.config.setup.container import AvailabilityContainer
from variant_availability.domain.availability.matchers import POLICY_ENCODED, POLICY_VARIANT_SCAN
from variant_availability.domain.options import ProductVariant, SelectedOption
from variant_availability.infrastructure.cache import DecodeCache


def _container(**kwargs):
    return AvailabilityContainer(AvailabilityOptions(metrics_enabled=False, **kwargs))


def test_container_shares_one_cache_across_queries(catalog_2x2):
    container = _container()
    encoded = "0:0,1,,1:1 "

    assert container.is_available(["Red", "M"], encoded, catalog_2x2) is True
    assert container.is_available(["Blue", "S"], encoded, catalog_2x2) is False
    assert container.matcher_for(encoded=encoded).is_available(["Blue", "M"], catalog_2x2) is True

    stats = container.cache.stats()
    assert stats["misses"] == 1
    assert stats["hits"] == 2


def test_container_applies_cache_bound():
    container = _container(cache_max_entries=8)
    assert container.cache.max_entries == 8


def test_matcher_for_selects_strategy():
    container = _container()
    assert container.matcher_for(encoded="0 ").policy == POLICY_ENCODED
    assert container.matcher_for(variants=[]).policy == POLICY_VARIANT_SCAN
    assert container.matcher_for().policy == POLICY_VARIANT_SCAN


def test_option_grid_through_container(catalog_2x2):
    container = _container()
    selection = [SelectedOption("Color", "Red"), SelectedOption("Size", "S")]

    strict = container.option_grid(catalog_2x2, selection, encoded="0:0 ")
    assert [s.is_available for s in strict[1].values] == [True, False]

    lenient = container.option_grid(
        catalog_2x2,
        selection,
        variants=[
            ProductVariant(
                selected_options=(SelectedOption("Color", "Red"), SelectedOption("Size", "S")),
                available_for_sale=False,
            )
        ],
    )
    assert [s.is_available for s in lenient[1].values] == [False, True]


def test_injected_empty_cache_is_kept(counting_decoder, catalog_2x2):
    cache = DecodeCache(max_entries=3, decoder=counting_decoder, metrics_enabled=False)
    container = AvailabilityContainer(cache=cache)

    assert container.cache is cache
    assert container.is_available(["Red", "S"], "0:0 ", catalog_2x2) is True
    assert counting_decoder.calls == ["0:0 "]
    assert container.cache.max_entries == 3
