import asyncio
import unittest
from typing import Any

from automata.constants.filters import BASS_BOOST_EQUALIZER, VAPORWAVE_EQUALIZER
from automata.nodes.api.responses.filters import EqualizerBand, Karaoke, Rotation, Timescale, Vibrato
from automata.players.filters import FilterChain, FilterConfiguration

FILTER_GROUPS = {"volume", "equalizer", "karaoke", "timescale", "vibrato", "rotation"}


class FakeSession:
    def __init__(self, guild_id: int = 1234, volume: float | None = 1.0) -> None:
        self.guild_id = guild_id
        self.volume = volume


class RecordingChannel:
    def __init__(self) -> None:
        self.updates: list[tuple[Any, dict]] = []

    def update_player(self, guild_id, payload) -> None:
        self.updates.append((guild_id, payload))

    @property
    def last_filters(self) -> dict:
        return self.updates[-1][1]["filters"]


class AsyncChannel(RecordingChannel):
    def __init__(self, error: Exception | None = None) -> None:
        super().__init__()
        self.error = error

    async def update_player(self, guild_id, payload) -> None:
        await asyncio.sleep(0)
        super().update_player(guild_id, payload)
        if self.error is not None:
            raise self.error


class TestFilterChain(unittest.TestCase):
    def setUp(self) -> None:
        self.session = FakeSession()
        self.channel = RecordingChannel()
        self.chain = FilterChain(self.session, self.channel)

    def test_every_change_sends_the_whole_configuration(self) -> None:
        self.chain.set_equalizer([EqualizerBand(band=0, gain=0.25)])
        self.chain.set_karaoke(Karaoke(level=1.0, monoLevel=1.0))

        self.assertEqual(len(self.channel.updates), 2)
        guild_id, payload = self.channel.updates[1]
        self.assertEqual(guild_id, 1234)
        self.assertEqual(
            payload,
            {
                "filters": {
                    "volume": 1.0,
                    "equalizer": [{"band": 0, "gain": 0.25}],
                    "karaoke": {"level": 1.0, "monoLevel": 1.0},
                    "timescale": None,
                    "vibrato": None,
                    "rotation": None,
                }
            },
        )

    def test_unset_groups_are_sent_as_none(self) -> None:
        self.chain.set_vibrato(Vibrato(frequency=4.0, depth=0.5))

        filters = self.channel.last_filters
        self.assertEqual(set(filters), FILTER_GROUPS)
        self.assertEqual(filters["vibrato"], {"frequency": 4.0, "depth": 0.5})
        self.assertEqual(filters["equalizer"], [])
        self.assertIsNone(filters["karaoke"])
        self.assertIsNone(filters["rotation"])

    def test_setting_none_disables_a_group(self) -> None:
        self.chain.set_rotation(Rotation(rotationHz=0.5)).set_rotation(None)

        self.assertIsNone(self.chain.rotation)
        self.assertIsNone(self.channel.last_filters["rotation"])

    def test_equalizer_none_resets_to_flat(self) -> None:
        self.chain.bass_boost().set_equalizer(None)

        self.assertEqual(self.chain.equalizer, [])
        self.assertEqual(self.channel.last_filters["equalizer"], [])

    def test_mutators_return_the_chain(self) -> None:
        result = self.chain.set_karaoke(Karaoke(level=0.5)).set_timescale(Timescale(speed=1.2)).eight_d()

        self.assertIs(result, self.chain)
        self.assertEqual(len(self.channel.updates), 3)

    def test_clear_filters(self) -> None:
        self.chain.nightcore().bass_boost().set_vibrato(Vibrato(depth=0.9))
        self.assertTrue(self.chain.configuration.changed)

        self.chain.clear_filters()

        self.assertFalse(self.chain.configuration.changed)
        self.assertEqual(
            self.channel.last_filters,
            {"volume": 1.0, "equalizer": [], "karaoke": None, "timescale": None, "vibrato": None, "rotation": None},
        )

    def test_sync_sends_the_current_session_volume(self) -> None:
        self.chain.set_karaoke(Karaoke(level=1.0))
        self.session.volume = 0.4
        self.chain.set_karaoke(None)

        self.assertEqual(self.channel.updates[0][1]["filters"]["volume"], 1.0)
        self.assertEqual(self.channel.last_filters["volume"], 0.4)
        self.assertEqual(self.chain.volume, 0.4)

    def test_sent_snapshots_are_not_changed_by_later_edits(self) -> None:
        bands = [{"band": 1, "gain": 0.1}]
        self.chain.set_equalizer(bands)
        bands[0]["gain"] = 0.9
        self.chain.set_karaoke(Karaoke(level=1.0))

        self.assertEqual(self.channel.updates[0][1]["filters"]["equalizer"], [{"band": 1, "gain": 0.1}])

    def test_options_given_as_dicts_are_sent_unchanged(self) -> None:
        self.chain.set_timescale({"speed": 1.2, "pitch": 0.9})

        self.assertEqual(self.channel.last_filters["timescale"], {"speed": 1.2, "pitch": 0.9})

    def test_unset_options_are_left_out_of_a_group(self) -> None:
        self.chain.set_timescale(Timescale(pitch=0.8))

        self.assertEqual(self.channel.last_filters["timescale"], {"pitch": 0.8})


class TestFilterPresets(unittest.TestCase):
    def setUp(self) -> None:
        self.channel = RecordingChannel()
        self.chain = FilterChain(FakeSession(), self.channel)

    def test_eight_d(self) -> None:
        self.chain.eight_d()

        self.assertEqual(self.channel.last_filters["rotation"], {"rotationHz": 0.2})

    def test_nightcore(self) -> None:
        self.chain.nightcore()

        self.assertEqual(self.channel.last_filters["timescale"], {"speed": 1.1, "pitch": 1.125, "rate": 1.05})

    def test_slowmo(self) -> None:
        self.chain.slowmo()

        self.assertEqual(self.channel.last_filters["timescale"], {"speed": 0.5, "pitch": 1.0, "rate": 0.8})

    def test_bass_boost(self) -> None:
        self.chain.bass_boost()

        self.assertEqual(self.channel.last_filters["equalizer"], [band.to_dict() for band in BASS_BOOST_EQUALIZER])
        self.assertEqual(len(self.channel.last_filters["equalizer"]), 15)

    def test_equalizer_presets_cover_every_band(self) -> None:
        for preset in ("soft", "tv", "treble_bass"):
            with self.subTest(preset=preset):
                getattr(self.chain, preset)()
                self.assertEqual([b["band"] for b in self.channel.last_filters["equalizer"]], list(range(15)))

    def test_vaporwave_sends_two_updates(self) -> None:
        self.chain.vaporwave()

        self.assertEqual(len(self.channel.updates), 2)
        self.assertIsNone(self.channel.updates[0][1]["filters"]["timescale"])
        filters = self.channel.last_filters
        self.assertEqual(filters["equalizer"], [band.to_dict() for band in VAPORWAVE_EQUALIZER])
        self.assertEqual(filters["timescale"], {"pitch": 0.55})


class TestFilterConfiguration(unittest.TestCase):
    def test_defaults_are_unchanged(self) -> None:
        self.assertFalse(FilterConfiguration().changed)

    def test_volume_is_not_a_change(self) -> None:
        self.assertFalse(FilterConfiguration(volume=0.5).changed)

    def test_equality_compares_the_wire_format(self) -> None:
        self.assertEqual(
            FilterConfiguration(karaoke=Karaoke(level=1.0), equalizer=[EqualizerBand(band=0, gain=0.1)]),
            FilterConfiguration(karaoke={"level": 1.0}, equalizer=[{"band": 0, "gain": 0.1}]),
        )
        self.assertNotEqual(FilterConfiguration(), FilterConfiguration(rotation=Rotation(rotationHz=0.2)))


class TestFilterSyncWithoutLoop(unittest.TestCase):
    def test_awaitable_update_is_dropped_with_a_warning(self) -> None:
        channel = AsyncChannel()
        chain = FilterChain(FakeSession(guild_id=7), channel)

        with self.assertLogs("Automata.Filters", level="WARNING") as logs:
            result = chain.set_rotation(Rotation(rotationHz=0.3))

        self.assertIs(result, chain)
        self.assertEqual(chain.rotation, Rotation(rotationHz=0.3))
        self.assertEqual(chain.pending_syncs, frozenset())
        self.assertEqual(channel.updates, [])
        self.assertIn("No running event loop, filters for 7 were not sent", logs.output[0])


class TestAsyncFilterSync(unittest.IsolatedAsyncioTestCase):
    async def test_awaitable_updates_are_scheduled_without_waiting(self) -> None:
        channel = AsyncChannel()
        chain = FilterChain(FakeSession(guild_id=99), channel)

        chain.eight_d().nightcore()

        self.assertEqual(len(chain.pending_syncs), 2)
        self.assertEqual(channel.updates, [])
        await asyncio.gather(*chain.pending_syncs)
        await asyncio.sleep(0)
        self.assertEqual(chain.pending_syncs, frozenset())
        self.assertEqual(len(channel.updates), 2)
        self.assertTrue(all(guild_id == 99 for guild_id, _ in channel.updates))

    async def test_failed_updates_are_logged_and_not_raised(self) -> None:
        channel = AsyncChannel(error=RuntimeError("node went away"))
        chain = FilterChain(FakeSession(guild_id=99), channel)

        with self.assertLogs("Automata.Filters", level="DEBUG") as logs:
            chain.set_karaoke(Karaoke(level=1.0))
            results = await asyncio.gather(*chain.pending_syncs, return_exceptions=True)
            await asyncio.sleep(0)

        self.assertIsInstance(results[0], RuntimeError)
        self.assertEqual(chain.pending_syncs, frozenset())
        self.assertIn("Failed to sync filters for 99", logs.output[0])
        self.assertEqual(chain.karaoke, Karaoke(level=1.0))


if __name__ == "__main__":
    unittest.main()
