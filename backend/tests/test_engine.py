import pytest
from collections import Counter
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
import multiprocessing

from quickword.services.words import DEFAULT_CATALOG, RoundWord, RoundWordEngine, WordCatalog, get_round_word
from quickword.services.words.engine import (
    ZERO_SEED_SUBSTITUTE,
    Xorshift32,
    fnv1a_32,
    round_key,
    scramble_word,
    select_index,
    shuffle_with_seed,
)


def test_round_key_format():
    assert round_key(30, 0) == '30:0'
    assert round_key(60, 1700000000000) == '60:1700000000000'
    assert round_key(30, -1800000) == '30:-1800000'


def test_round_key_distinguishes_fields():
    # "1:11" vs "11:1" - the separator keeps these apart
    assert round_key(1, 11) != round_key(11, 1)


@pytest.mark.parametrize('bad', [1.7e12, '0', None, True])
def test_round_key_requires_integers(bad):
    with pytest.raises(TypeError):
        round_key(30, bad)
    with pytest.raises(TypeError):
        round_key(bad, 0)


def test_fnv1a_known_vectors():
    assert fnv1a_32('') == 0x811C9DC5
    assert fnv1a_32('a') == 0xE40C292C
    assert fnv1a_32('foobar') == 0xBF9CF968
    assert fnv1a_32(b'foobar') == 0xBF9CF968
    assert fnv1a_32('30:0') == 585594620


def test_fnv1a_stays_within_32_bits():
    h = fnv1a_32('x' * 1000)
    assert 0 <= h <= 0xFFFFFFFF


def test_xorshift_sequence_matches_browser_client():
    rng = Xorshift32(1)
    # a logical right shift would give 67634689 for the second draw
    assert [rng.next_uint32() for _ in range(3)] == [270369, 67601921, 1815334946]
    rng = Xorshift32(0x80000000)
    assert [rng.next_uint32() for _ in range(2)] == [2147991552, 2029550691]


def test_xorshift_draws_in_unit_interval():
    rng = Xorshift32(2463534242)
    for _ in range(1000):
        value = rng.random()
        assert 0.0 <= value < 1.0


def test_xorshift_zero_seed_is_substituted():
    zero = Xorshift32(0)
    assert zero.state == ZERO_SEED_SUBSTITUTE
    assert zero.next_uint32() == 1359758873
    # seeds are taken modulo 2**32
    assert Xorshift32(2 ** 32).state == ZERO_SEED_SUBSTITUTE


def test_shuffle_does_not_mutate_input():
    chars = list('planet')
    out = shuffle_with_seed(chars, 12345)
    assert chars == list('planet')
    assert sorted(out) == sorted(chars)


def test_scramble_known_values():
    assert scramble_word('planet', 12345) == 'pntale'
    assert scramble_word('tomorrow', 1) == 'ooorrmwt'
    # seed 0 goes through the substitute seed rather than an identity shuffle
    assert scramble_word('house', 0) == 'hueso'


@pytest.mark.parametrize('word', ['', 'a', 'ab', 'owl', 'bdr'])
def test_short_words_are_reversed(word):
    assert scramble_word(word, 0xDEADBEEF) == word[::-1]


def test_identity_shuffle_falls_back_to_swap():
    # seed 12312 shuffles "abcd" back into itself
    assert ''.join(shuffle_with_seed('abcd', 12312)) == 'abcd'
    assert scramble_word('abcd', 12312) == 'bacd'


def test_identity_fallback_with_doubled_first_letter():
    # swapping two equal letters cannot change the word
    assert ''.join(shuffle_with_seed('aabc', 12299)) == 'aabc'
    assert scramble_word('aabc', 12299) == 'aabc'


def test_scramble_is_a_permutation_and_never_identity():
    for seed in range(0, 5000, 7):
        for word in ('planet', 'tomorrow', 'bird', 'house'):
            scrambled = scramble_word(word, seed)
            assert Counter(scrambled) == Counter(word)
            assert scrambled != word


def test_get_round_word_golden_small_catalog(small_catalog):
    assert select_index(small_catalog, 585594620) == 2
    assert get_round_word(0, 30, small_catalog) == RoundWord('money', 'eymno')
    assert get_round_word(0, 60, small_catalog) == RoundWord('house', 'eouhs')
    assert get_round_word(1700000000000, 30, small_catalog) == RoundWord('money', 'mneoy')
    assert get_round_word(-1800000, 30, small_catalog) == RoundWord('bird', 'brid')


def test_get_round_word_golden_default_catalog():
    assert get_round_word(0, 30) == RoundWord('rocket', 'tecrko')
    assert get_round_word(1700000000000, 60) == RoundWord('second', 'cendso')
    assert get_round_word(1760000400000, 60) == RoundWord('ocean', 'ecano')
    assert get_round_word(1760000400000, 30) == RoundWord('storm', 'osmrt')


def test_short_word_round_uses_reversal():
    catalog = WordCatalog(['cat', 'dog', 'owl'])
    assert get_round_word(0, 30, catalog) == RoundWord('owl', 'lwo')


def test_single_word_catalog_always_selected():
    catalog = WordCatalog(['solo'])
    for start in (0, 1700000000000, -1, 1760000700000):
        assert get_round_word(start, 30, catalog).word == 'solo'
    assert get_round_word(0, 30, catalog).scrambled == 'oslo'


def test_selected_word_is_catalog_member():
    for start in range(0, 200 * 1800000, 1800000):
        result = get_round_word(start, 30)
        assert result.word in DEFAULT_CATALOG
        assert Counter(result.scrambled) == Counter(result.word)


def test_determinism_repeated_calls():
    first = get_round_word(1760000700000, 30)
    for _ in range(50):
        assert get_round_word(1760000700000, 30) == first


def test_engine_binds_catalog(small_catalog):
    engine = RoundWordEngine(small_catalog)
    assert engine.catalog is small_catalog
    assert engine.derive(0, 30) == get_round_word(0, 30, small_catalog)
    assert engine.derive(0, 30).to_dict() == {'word': 'money', 'scrambled': 'eymno'}


def test_concurrent_threads_agree():
    starts = [1760000400000 + k * 1800000 for k in range(64)]
    expected = [get_round_word(s, 30) for s in starts]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda s: get_round_word(s, 30), starts))
    assert results == expected


def test_separate_processes_agree():
    starts = [0, 1700000000000, 1760000400000, 1760000700000]
    expected = [tuple(get_round_word(s, 30)) for s in starts]
    ctx = multiprocessing.get_context('spawn')
    with ProcessPoolExecutor(max_workers=2, mp_context=ctx) as pool:
        results = [tuple(r) for r in pool.map(get_round_word, starts, [30] * len(starts))]
    assert results == expected
