import random
from typing import Dict, List, Optional
from datetime import datetime
from brainmate.core.clock import utc_now, epoch_millis

PLATFORMS = ["Brunch", "Medium", "Velog", "브런치", "ㅍㅍㅅㅅ"]

TOPICS = [
    "디자인 철학",
    "인지심리",
    "UX 리서치",
    "제품 사고",
    "창의성",
    "시스템 사고",
    "행동경제학",
    "글쓰기",
    "비판적 사고",
    "학습 이론",
]

SAMPLE_TITLES = [
    "느린 사고가 만드는 깊이 있는 디자인",
    "주의력의 경제학: 디지털 시대의 집중력",
    "좋은 질문이 좋은 답보다 중요한 이유",
    "시스템 1과 시스템 2 사이에서",
    "창의성은 제약에서 시작된다",
    "읽기와 쓰기, 그리고 생각하기",
    "인지 부하를 줄이는 인터페이스 디자인",
]

THUMBNAILS = [
    "https://images.unsplash.com/photo-1546098073-4d874a1c59f8?w=400&h=300&fit=crop",
    "https://images.unsplash.com/photo-1639414839192-0562f4065ffd?w=400&h=300&fit=crop",
    "https://images.unsplash.com/photo-1763531414423-7c9e3642910e?w=400&h=300&fit=crop",
    "https://images.unsplash.com/photo-1729105140273-b5e886a4f999?w=400&h=300&fit=crop",
    "https://images.unsplash.com/photo-1656877280226-ebf9ea8b1303?w=400&h=300&fit=crop",
    "https://images.unsplash.com/photo-1524995997946-a1c2e315a42f?w=400&h=300&fit=crop",
    "https://images.unsplash.com/photo-1513001900722-370f803f498d?w=400&h=300&fit=crop",
]

PLATFORM_ICON = "📚"
AUTHOR = "익명"
EXCERPT = "이 글은 깊이 있는 사고와 의도적인 읽기에 대한 탐구입니다..."

# Read time bounds in minutes (inclusive)
MIN_READ_TIME = 5
MAX_READ_TIME = 14

SAMPLE_CONTENT = """# 느린 사고의 가치

디지털 시대에 우리는 끊임없이 빠른 정보 소비를 강요받습니다. 그러나 진정한 이해와 통찰은 느린 사고에서 나옵니다.

## 시스템 1과 시스템 2

대니얼 카너먼이 말한 두 가지 사고 시스템을 떠올려봅시다. 시스템 1은 빠르고 직관적이며, 시스템 2는 느리고 의도적입니다.

깊이 있는 학습과 창의적 사고는 시스템 2의 영역입니다. 우리가 글을 읽을 때, 특히 어려운 개념을 다룰 때, 우리는 시스템 2를 활성화해야 합니다.

## 의도적인 읽기

의도적인 읽기란 무엇일까요? 그것은 단순히 글자를 눈으로 따라가는 것이 아니라, 저자의 논리를 따라가고, 질문을 던지고, 자신의 경험과 연결하는 능동적인 과정입니다.

이러한 읽기는 시간이 걸립니다. 그러나 그 시간은 낭비가 아닙니다. 오히려 가장 가치 있는 투자입니다.

## 결론

빠른 정보 소비의 시대에, 느린 사고와 의도적인 읽기는 우리의 피난처입니다. 이것이 바로 독서의 성소가 필요한 이유입니다."""


class FeedGenerator:
    """
    Synthesizes the sample daily feed.

    Titles, platforms and thumbnails cycle through fixed pools by position;
    each article gets two topics drawn independently (repeats allowed) and a
    read time drawn uniformly from MIN_READ_TIME..MAX_READ_TIME.
    """

    def __init__(self, size: int = 7, rng: Optional[random.Random] = None):
        self.size = size
        self.rng = rng or random.Random()

    def generate(self, now: Optional[datetime] = None) -> List[Dict]:
        now = now or utc_now()
        stamp = epoch_millis(now)
        return [self._article(stamp, i) for i in range(self.size)]

    def _article(self, stamp: int, index: int) -> Dict:
        return {
            "id": f"article-{stamp}-{index}",
            "title": SAMPLE_TITLES[index % len(SAMPLE_TITLES)],
            "platform": PLATFORMS[index % len(PLATFORMS)],
            "platformIcon": PLATFORM_ICON,
            "topics": [self.rng.choice(TOPICS), self.rng.choice(TOPICS)],
            "readTime": self.rng.randint(MIN_READ_TIME, MAX_READ_TIME),
            "thumbnail": THUMBNAILS[index % len(THUMBNAILS)],
            "author": AUTHOR,
            "excerpt": EXCERPT,
            "content": SAMPLE_CONTENT,
        }
