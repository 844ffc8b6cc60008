#!/usr/bin/env python
"""
餐饮成本计算检查 - 실행 스크립트
루트 디렉토리에서 실행: python run_calculation_check.py
"""

import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# 환경 변수 로드
from dotenv import load_dotenv
load_dotenv()


def main() -> None:
    from costcheck.services.calculation_check import build_report_lines

    for line in build_report_lines():
        print(line)


if __name__ == "__main__":
    main()
