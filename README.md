# zbp

The logic behind a set of small group chat bot plugins: per-session reply
and voice modes, emoji mixing, name and poke replies, a make-believe group
air conditioner, host status reports, video-link summaries, couple stories,
pinyin-to-emoji translation, the daily fortune layout, epidemic lookups and
drift bottles.

Each module takes plain values (group ids, user ids, message text) and
returns the text or data a bot would send, so it can be wired into any chat
framework.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `zbp.aireply` – sessions are keyed by `session_id(group_id, user_id)`
  (the group id, or the negated user id in private chats). A `ModeStore`
  holds one integer per session. `set_reply_mode` and `get_reply_mode`
  store and read the reply mode (`青云客` or `小爱`; the first is the
  default). `TTSModes` holds the ordered list of voice modes with
  `list`, `set_sound_mode`, `get_sound_mode` and
  `set_default_sound_mode`, which swaps a mode to the front.
- `zbp.emojimix` – `face_to_emoji` turns a text or face segment into a
  code point, `match` finds two mixable emoji in a message, and
  `mix_urls` builds the two candidate image addresses to try in order.
- `zbp.chat` – `name_reply` answers to the bot's name; `TokenBucket` and
  `PokeResponder` answer pokes and go quiet when a group pokes too often
  (8 tokens per 5 minutes by default); `AirConditioner` keeps an on/off
  switch and temperature per group (26℃ by default).
- `zbp.ai_false` – `cpu_percent`, `mem_percent`, `disk_report` and
  `status_text` report on the host through psutil; `pack_limit`,
  `unpack_limit` and `parse_limit_command` handle the default rate limit
  setting packed into one integer (seconds in the low, burst in the high
  16 bits).
- `zbp.bilibili_parse` – `find_ids` and `cuturl` find av/BV video ids,
  `video_query` builds the lookup address, `row` shows large counts in
  units of 万, `format_video` builds the summary segments and `parse`
  fetches and summarises a video (the fetch function can be passed in).
- `zbp.cpstory` – `StoryDB` keeps story templates in SQLite and `pick`s
  one at random; `fill_story` casts two names into a `CpStory`;
  `split_names` reads the two names from a command.
- `zbp.chouxianghua` – `translate` turns text into emoji by
  pronunciation, looking pairs of characters up first, over a `PinyinDB`.
- `zbp.fortune` – `kind_index` gives the stored index of a background
  set; `text_layout`, `offset` and `rows_num` place the characters of
  the fortune text in vertical columns.
- `zbp.epidemic` – `parse_areas` reads the `Area` tree and update time
  from a query response, `find_city` searches it and `format_report`
  builds the message.
- `zbp.driftbottle` – a `Sea` keeps channels of `Bottle`s in SQLite
  (`create_channel`, `throw`, `fetch`, `destroy`, `count`); bottle ids
  are the `crc64_iso` of their content; `parse_throw` and `parse_fetch`
  read the throw and pick-up commands.

## Examples

```python
from zbp.bilibili_parse import row
from zbp.chat import AirConditioner
from zbp.aireply import ModeStore, session_id, set_reply_mode, get_reply_mode

row(12345)   # "1.23万"
row(999)     # "999"

ac = AirConditioner()
ac.turn_on(1)
print(ac.set_temperature(1, 20))   # "❄️风速中\n群温度 20℃"

store = ModeStore()
gid = session_id(0, 42)            # -42
set_reply_mode(store, gid, "小爱")
get_reply_mode(store, gid)         # "小爱"
```

```python
from zbp.driftbottle import Bottle, Sea, parse_throw

with Sea(":memory:") as sea:
    grp, channel, msg = parse_throw("丢漂流瓶 你好", 123)   # (123, "global", "你好")
    sea.throw(Bottle.new(10001, grp, "Alice", msg), channel)
    sea.count("global")               # 1
    sea.fetch("global", 123).msg      # "你好"
```

## What this package does not do

There is no command to run and no bot process: the package does not parse
command-line options, read or write a bot configuration file, connect to a
chat server, dispatch incoming messages to the modules or format log output.
It also has no gacha simulator, choice helper, character reply set, search
link or random picture plugin. A program that uses these modules has to
provide the connection, the message routing and the sending itself.