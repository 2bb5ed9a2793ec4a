from users_api.utils.deadline import Deadline


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_remaining_counts_down():
    clock = FakeClock()
    deadline = Deadline(5, clock=clock)

    clock.now += 2
    assert deadline.remaining() == 3
    assert not deadline.expired()


def test_expired_after_timeout():
    clock = FakeClock()
    deadline = Deadline(5, clock=clock)

    clock.now += 6
    assert deadline.remaining() == 0
    assert deadline.expired()


def test_zero_timeout_is_expired_immediately():
    assert Deadline(0).expired()
