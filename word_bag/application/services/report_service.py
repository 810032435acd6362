from dataclasses import dataclass
from loguru import logger
from word_bag.application.settings import Settings
from word_bag.application.services.bag_of_words import BagOfWords

@dataclass
class ReportService:
    settings: Settings

    def summarize(self, bag: BagOfWords) -> dict:
        words = list(bag.words())
        level = "DEBUG" if self.settings.debug else "INFO"
        logger.log(level, "Summarizing bag: distinct={}, total={}", len(bag), bag.count())
        return {
            "words": words,
            "distinct": len(bag),
            "total": bag.count(),
            "empty": bag.is_empty(),
        }

    def render(self, summary: dict) -> list[str]:
        lines = [f"Key: {word}" for word in summary["words"]]
        if summary["empty"]:
            lines.append("bag is empty")
        else:
            lines.append("bag is not empty")
            lines.append(f"there are {summary['distinct']} words in the bag")
            lines.append(f"total word count is: {summary['total']}")
        return lines
