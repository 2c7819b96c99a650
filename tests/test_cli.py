"""Unit tests for the mediaprobe command-line interface"""

import unittest
from datetime import timedelta
from unittest.mock import patch

from mediaprobe.__main__ import main, parse_args
from mediaprobe.formatting import format_duration

class TestCli(unittest.TestCase):
    def setUp(self):
        patcher = patch("mediaprobe.__main__.configure_logging")
        self.mock_configure_logging = patcher.start()
        self.addCleanup(patcher.stop)

    @patch("mediaprobe.__main__.print_success")
    @patch("mediaprobe.__main__.Mediainfo")
    def test_prints_duration(self, mock_mediainfo, mock_print_success):
        mock_mediainfo.return_value.determine_video_duration.return_value = timedelta(milliseconds=42000)

        self.assertEqual(main(["--mediainfo", "/opt/mediainfo", "/tmp/film.avi"]), 0)

        mock_mediainfo.assert_called_once_with("/opt/mediainfo", timeout=None)
        mock_print_success.assert_called_once_with("film.avi: 0:00:42.000 (42000 ms)")

    @patch("mediaprobe.__main__.print_error")
    @patch("mediaprobe.__main__.Mediainfo")
    def test_missing_duration(self, mock_mediainfo, mock_print_error):
        mock_mediainfo.return_value.determine_video_duration.return_value = None

        self.assertEqual(main(["/tmp/film.avi"]), 1)
        mock_print_error.assert_called_once()

    @patch("mediaprobe.__main__.Mediainfo")
    def test_interrupted(self, mock_mediainfo):
        mock_mediainfo.return_value.determine_video_duration.side_effect = KeyboardInterrupt
        self.assertEqual(main(["/tmp/film.avi"]), 130)

    @patch("mediaprobe.__main__.Mediainfo")
    def test_timeout_and_log_level(self, mock_mediainfo):
        mock_mediainfo.return_value.determine_video_duration.return_value = timedelta(seconds=1)

        main(["--timeout", "5", "--log-level", "DEBUG", "/tmp/film.avi"])

        self.assertEqual(mock_mediainfo.call_args.kwargs["timeout"], 5.0)
        self.assertEqual(self.mock_configure_logging.call_args.args[0], "DEBUG")

    def test_rejects_invalid_timeouts(self):
        for value in ["soon", "0", "-1", "nan", "inf"]:
            with self.subTest(value=value):
                with self.assertRaises(SystemExit) as ctx:
                    parse_args(["--timeout", value, "/tmp/film.avi"])
                self.assertEqual(ctx.exception.code, 2)

    @patch("mediaprobe.__main__.PROBE_TIMEOUT", "2.5")
    def test_timeout_from_environment(self):
        self.assertEqual(parse_args(["/tmp/film.avi"]).timeout, 2.5)

    @patch("mediaprobe.__main__.PROBE_TIMEOUT", "soon")
    def test_invalid_timeout_from_environment(self):
        with self.assertRaises(SystemExit) as ctx:
            parse_args(["/tmp/film.avi"])
        self.assertEqual(ctx.exception.code, 2)

    def test_input_required(self):
        with self.assertRaises(SystemExit) as ctx:
            parse_args([])
        self.assertEqual(ctx.exception.code, 2)

class TestFormatDuration(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_duration(timedelta(milliseconds=42000)), "0:00:42.000")
        self.assertEqual(format_duration(timedelta(hours=1, minutes=2, seconds=3, milliseconds=45)), "1:02:03.045")
        self.assertEqual(format_duration(timedelta(hours=26)), "26:00:00.000")

if __name__ == "__main__":
    unittest.main()
