#!/usr/bin/env python3
"""
Pydantic Evals：简历洞察 / 差距分析回归测试。

用法: python scripts/run_flow_evals.py [--dataset resume|shortcomings|all]
需要 .env 中配置 CAREERAI_DEFAULT_MODEL 对应厂商的 API Key；无 key 时跳过。
"""
from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path

# 未 pip install -e 时也可直接运行
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from careerai.core.config import configure_logging  # noqa: E402
from careerai.flows import FLOWS, build_invoker  # noqa: E402

_KEY_VARS = ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GEMINI_API_KEY", "DEEPSEEK_API_KEY")


async def run_resume_evals(invoker) -> None:
    from careerai.evals import resume_analysis_dataset

    async def task(inputs: dict) -> str:
        # 返回全部分段名，期望值为其中之一
        result = await invoker.invoke(FLOWS["resume_analysis"], inputs)
        return ", ".join(s["section"] for s in result.unwrap()["sectionAnalyses"])

    report = await resume_analysis_dataset().evaluate(task)
    print("\n=== Resume analysis 回归 ===\n")
    report.print()


async def run_shortcoming_evals(invoker) -> None:
    from careerai.evals import shortcoming_analysis_dataset

    async def task(inputs: dict) -> str:
        result = await invoker.invoke(FLOWS["shortcoming_analysis"], inputs)
        return ", ".join(s["skill"] for s in result.unwrap()["shortcomings"])

    report = await shortcoming_analysis_dataset().evaluate(task)
    print("\n=== Shortcoming analysis 回归 ===\n")
    report.print()


async def main() -> int:
    parser = argparse.ArgumentParser(description="CareerAI flow 回归评估")
    parser.add_argument("--dataset", "-d", default="all", choices=["resume", "shortcomings", "all"])
    args = parser.parse_args()

    if not any(os.getenv(k) for k in _KEY_VARS):
        print("未配置任何模型 API Key，跳过需 LLM 的 Evals。")
        return 0

    configure_logging()
    invoker = build_invoker()
    if args.dataset in ("resume", "all"):
        await run_resume_evals(invoker)
    if args.dataset in ("shortcomings", "all"):
        await run_shortcoming_evals(invoker)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
