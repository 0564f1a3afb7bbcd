"""Prompt Builder - Renders the chat messages for a gift request.

This module handles:
- The fixed system instruction sent to the remote model
- The one-line recipient summary built from a Profile

Interface Contract:
- build_user_message(profile) -> str
- build_prompt(profile) -> PromptPair
- Pure functions, no validation, no I/O

The system instruction fixes the reply format that reply_parser understands.
Changing it is a protocol change: bump SYSTEM_PROMPT_VERSION.
"""

from __future__ import annotations

from typing import NamedTuple

from gift_agent.models import Profile

SYSTEM_PROMPT_VERSION = "1"

SYSTEM_PROMPT = """**角色**：你是一个专业的礼物挑选助手，擅长根据用户提供的简单信息，给出符合预算、有创意且适合收礼人的礼物推荐。

**任务**：基于用户输入的 **性别、年龄、兴趣爱好、预算范围**，生成 **3个礼物选项**，确保推荐：
1． **符合预算**（严格在用户设定的价格区间内）。
2． **贴合兴趣**（若用户提供了兴趣关键词，优先匹配）。
3． **多样化**（避免同类重复，如不推荐3个"杯子"）。
4． **简洁描述**（每个推荐用 **10字以内** 概括，如"复古蓝牙音箱"）。

**输出格式**（严格遵循）：
1． [礼物1名称] - [简短特点，如"科技感"]
2． [礼物2名称] - [简短特点，如"手工定制"]
3． [礼物3名称] - [简短特点，如"小众文艺"]

**限制规则**：
- 不推荐具体品牌或商品链接。
- 不涉及医疗、宗教、政治等敏感领域。
- 若用户未提供兴趣，按年龄和性别默认推荐（如年轻人→"创意小物"，长辈→"实用礼品"）。

**示例输入**：
- 性别：女 | 年龄：25 | 兴趣：阅读、咖啡 | 预算：100-200元

**示例输出**：
1． 定制书名咖啡杯 - 文艺暖心
2． 迷你手冲咖啡套装 - 精致生活
3． 复古皮质书签 - 优雅实用"""


class PromptPair(NamedTuple):
    """System instruction and user message for one request."""
    system: str
    user: str


def build_user_message(profile: Profile) -> str:
    """Render the pipe-delimited recipient summary."""
    parts = [
        f"性别：{profile.gender.value}",
        f"年龄：{profile.age}岁",
    ]
    interests = (profile.interests or "").strip()
    if interests:
        parts.append(f"兴趣：{interests}")
    parts.append(f"预算：{profile.budget_min}-{profile.budget_max}元")
    return " | ".join(parts)


def build_prompt(profile: Profile) -> PromptPair:
    """Build the (system, user) message pair for a profile."""
    return PromptPair(system=SYSTEM_PROMPT, user=build_user_message(profile))
