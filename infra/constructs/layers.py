from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.bundling import install_requirements

LAMBDA_RUNTIME = _lambda.Runtime.PYTHON_3_14


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """ローカル環境で依存関係をインストールする Bundling クラス"""

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        del options  # unused
        return install_requirements(
            Path(self.source_path) / "requirements.txt",
            Path(output_dir) / "python",
        )


class Layers(Construct):
    """Lambda Layers Construct"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        # powertools / pydantic / stripe をまとめた共通レイヤー
        layer_source_path = "layers/common_layer"

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                layer_source_path,
                bundling=BundlingOptions(
                    image=LAMBDA_RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(layer_source_path),
                ),
            ),
            compatible_runtimes=[LAMBDA_RUNTIME],
            description="Hotel booking common dependencies",
        )
