"""Tests for progress/status reporting."""

import pytest

from transcriber.progress import ProgressReporter, video_progress


class TestVideoProgress:
    def test_first_video_starts_at_ten(self):
        assert video_progress(0, 3) == 10.0

    def test_second_of_two(self):
        assert video_progress(1, 2) == 55.0

    def test_never_reaches_hundred_before_completion(self):
        assert video_progress(4, 5) == pytest.approx(82.0)

    def test_rejects_empty_total(self):
        with pytest.raises(ValueError):
            video_progress(0, 0)


class TestProgressReporter:
    @pytest.mark.asyncio
    async def test_updates_notify_callback(self, record_progress, progress_log):
        reporter = ProgressReporter(callback=record_progress)

        await reporter.start("Analisando PDF...")
        await reporter.update(10, "Participantes identificados.")

        assert progress_log == [(0.0, "Analisando PDF..."), (10, "Participantes identificados.")]
        assert reporter.current.percentage == 10
        assert reporter.current.label == "Participantes identificados."

    @pytest.mark.asyncio
    async def test_percentage_cannot_decrease_within_run(self):
        reporter = ProgressReporter()
        await reporter.start("início")
        await reporter.update(55, "meio")

        with pytest.raises(ValueError):
            await reporter.update(10, "volta")
        assert reporter.current.percentage == 55

    @pytest.mark.asyncio
    async def test_start_resets_the_floor(self):
        reporter = ProgressReporter()
        await reporter.update(100, "fim")

        await reporter.start("nova execução")

        assert reporter.current.percentage == 0.0

    @pytest.mark.asyncio
    async def test_values_are_clamped(self):
        reporter = ProgressReporter()

        await reporter.update(140, "acima")

        assert reporter.current.percentage == 100.0

    @pytest.mark.asyncio
    async def test_fail_keeps_percentage(self, record_progress, progress_log):
        reporter = ProgressReporter(callback=record_progress)
        await reporter.update(55, "vídeo 2")

        await reporter.fail("Ocorreu um erro.")

        assert reporter.current.percentage == 55
        assert progress_log[-1] == (55, "Ocorreu um erro.")

    @pytest.mark.asyncio
    async def test_async_callback_is_awaited(self):
        seen = []

        async def callback(percentage: float, label: str) -> None:
            seen.append(label)

        reporter = ProgressReporter(callback=callback)
        await reporter.start("Anonimizando o texto...")

        assert seen == ["Anonimizando o texto..."]
