# retroapi

A small client for the RetroAchievements web API, built on the standard
library alone.

## Installation

```
pip install .
```

## Usage

Create a client with your web API key. `new_client` targets the public
host `https://retroachievements.org` and sends a `User-Agent` of the form
`retroapi/v<installed version>`.

```python
from retroapi.client import new_client

client = new_client("placeholder")

game = client.get_game(293)
print(game)

unlocks = client.get_achievement_unlocks(1, count=10, offset=0)
top_ten = client.get_top_ten_users()
```

To point at a different host or set your own User-Agent, build a `Client`
directly. An optional fourth argument, `opener`, is any object with an
`open(request)` method such as a `urllib.request.OpenerDirector`; a
default opener from `urllib.request.build_opener()` is used otherwise.

```python
from retroapi.client import Client

client = Client("http://localhost:8080", "my-app/1.0", "placeholder")
```

The key is sent as the `y` query parameter. Only `http` and `https` hosts
are accepted.

### Available calls

Achievements and events:

- `get_achievement_unlocks(achievement_id, count, offset)`
- `get_achievement_of_the_week()`

Comments:

- `get_comments(kind, target, count, offset)` with `kind` a
  `retroapi.comment.CommentKind` (`GAME`, `ACHIEVEMENT` or `USER`) or its
  integer value. `target` is an integer ID for games and achievements and
  a username string for users; a mismatch raises `TypeError`.

Feed:

- `get_recent_game_awards(starting_date, count, offset, include_partial_awards)`.
  `starting_date` is a `date` or `datetime` (an aware datetime is taken in
  UTC) and is sent as `YYYY-MM-DD`. `include_partial_awards` is a
  `retroapi.feed.PartialAwards` with the flags `beaten_softcore`,
  `beaten_hardcore`, `completed` and `mastered`; it is sent only when at
  least one flag is set.
- `get_active_claims()`
- `get_claims(kind)` with `kind` a `retroapi.feed.ClaimKind`
  (`COMPLETED`, `DROPPED`, `EXPIRED`) or its integer value
- `get_top_ten_users()`

Games:

- `get_game(game_id)`
- `get_game_extended(game_id, unofficial)`
- `get_game_hashes(game_id)`
- `get_achievement_count(game_id)`
- `get_achievement_distribution(game_id, unofficial, hardcore)`
- `get_game_rank_and_score(game_id, latest_masters)`

Leaderboards:

- `get_game_leaderboards(game_id, count, offset)`
- `get_leaderboard_entries(leaderboard_id, count, offset)`

Optional arguments may be left out; they are then not sent to the server.

### Results and errors

Results are the decoded JSON, not typed models: dictionaries for
single-object calls and lists for `get_active_claims`, `get_claims`,
`get_top_ten_users` and `get_game_rank_and_score`.

A single-object call returns `None` when the server answers 404 or
answers 200 with an empty list. A list call returns `[]` for an empty or
`null` body.

Every failure of a call raises `retroapi.base.EndpointError`. Its
`context` is `"calling endpoint"` when the request could not be made, or
`"parsing response object"` / `"parsing response list"` when the answer
could not be used; its `cause` holds the underlying exception. For an
unexpected status code the cause is a `retroapi.response.ResponseError`
with `status_code` and `body`; for a body that is not valid JSON, or of
the wrong shape, it is a `ValueError`.

### Lower-level helpers

`retroapi.request` builds a `Request` from small detail functions
(`method`, `path`, `api_token`, `bearer_token`, `user_agent` and the
query-parameter helpers `a`, `c`, `d`, `f`, `g`, `h`, `i`, `k`, `m`, `o`,
`t`, `u`) via `new_request(host, *details)`. `retroapi.response` decodes a
`Response` with `response_object` and `response_list`.

### What it does not cover

Only the calls listed above are available. There are no user, system or
ticket calls, no command-line tool, and no caching or retrying of
requests.

## Running the tests

```
pip install ".[test]"
pytest
```