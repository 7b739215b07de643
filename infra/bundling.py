import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

# pydantic-core はネイティブ拡張のため、Lambda 実行環境向けの wheel を指定して取得する
LAMBDA_PYTHON_VERSION = "3.14"
LAMBDA_PLATFORM = "manylinux2014_x86_64"


def installer_commands(requirements_path: Path, target_dir: Path) -> list[list[str]]:
    """試行するインストールコマンドを優先順に返す（uv → pip）"""
    return [
        [
            "uv",
            "pip",
            "install",
            "-r",
            str(requirements_path),
            "--target",
            str(target_dir),
            "--python-platform",
            "x86_64-manylinux2014",
            "--python-version",
            LAMBDA_PYTHON_VERSION,
            "--quiet",
        ],
        [
            "pip",
            "install",
            "-r",
            str(requirements_path),
            "-t",
            str(target_dir),
            "--platform",
            LAMBDA_PLATFORM,
            "--python-version",
            LAMBDA_PYTHON_VERSION,
            "--only-binary=:all:",
            "--quiet",
        ],
    ]


def install_requirements(requirements_path: Path, target_dir: Path) -> bool:
    """requirements.txt の依存関係をローカルでインストールする。

    Args:
        requirements_path: requirements.txt のパス
        target_dir: インストール先ディレクトリ

    Returns:
        True: いずれかのインストーラで成功
        False: requirements.txt が無い、またはすべて失敗（Docker にフォールバック）
    """
    if not requirements_path.exists():
        logger.warning("requirements.txt not found: %s", requirements_path)
        return False

    for command in installer_commands(requirements_path, target_dir):
        tool = command[0]
        try:
            logger.info("Trying local bundling with %s...", tool)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", tool)
            continue
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", tool, e)
            continue
        logger.info("Local bundling with %s succeeded", tool)
        return True

    logger.warning("Local bundling failed, falling back to Docker")
    return False
