from dataclasses import dataclass


@dataclass(frozen=True)
class LinkStatsModel:
    # fmt: off
    total_urls: int     # Number of stored links
    active_urls: int    # Links whose expiry is still ahead
    expired_urls: int   # Links past their expiry
    total_clicks: int   # Sum of clicks over every stored link
    # fmt: on

    def to_dict(self) -> dict[str, int]:
        return {
            'totalUrls': self.total_urls,
            'activeUrls': self.active_urls,
            'expiredUrls': self.expired_urls,
            'totalClicks': self.total_clicks,
        }
