import pavlov


def test_assert_that_fixture(assert_that):
    assert assert_that is pavlov.assert_that
    assert_that([1, 2, 3], "items").is_same_as([1, 2, 3])
