"""Tests for the application entry point"""
import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

import main
from collectors import FolderSizeCollector


class TestMain:
    """Test startup wiring"""

    def test_main_runs_server(self, tmp_path, monkeypatch):
        """Test main serves folder sizes on the configured address"""
        (tmp_path / "data.bin").write_bytes(b"x" * 3)
        monkeypatch.setenv("FOLDER_PATHS_STR", str(tmp_path))
        monkeypatch.setenv("METRICS_PORT", "9999")
        responses = []

        def serve(app, **kwargs):
            responses.append(TestClient(app).get("/metrics"))

        with patch('main.uvicorn.run', side_effect=serve) as mock_run:
            main.main()

        assert mock_run.call_args.kwargs["port"] == 9999
        assert responses[0].status_code == 200
        assert f'folder_size{{folder="{tmp_path}"}} 3\n' in responses[0].text

    @patch.object(FolderSizeCollector, 'cleanup')
    @patch('main.uvicorn.run')
    def test_collectors_cleaned_up_after_run(self, mock_run, mock_cleanup):
        """Test collector thread pools are shut down when the server stops"""
        main.main()

        mock_cleanup.assert_called_once()

    @patch.object(FolderSizeCollector, 'cleanup')
    @patch('main.uvicorn.run', side_effect=OSError("address in use"))
    def test_main_exits_on_failure(self, mock_run, mock_cleanup):
        """Test startup failures exit with status 1 after cleaning up collectors"""
        with pytest.raises(SystemExit) as exc_info:
            main.main()

        assert exc_info.value.code == 1
        mock_cleanup.assert_called_once()
