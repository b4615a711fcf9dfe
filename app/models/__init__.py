from .youtube import Thumbnail, Thumbnails, Snippet, ContentDetails, Statistics, VideoItem, VideoListResponse, VideoSummary
from .api import GenerateTitlesRequest, GenerateTitlesResponse, VideoInfoResponse
from .enums import MessageKind
