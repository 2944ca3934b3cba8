import os

# Lambda ハンドラはモジュール読み込み時に boto3 リソースを生成するため、
# テスト収集前に環境変数を設定しておく
os.environ.setdefault("TABLE_NAME", "bus-trip-table-test")
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "bus-trip-catalog-test")
