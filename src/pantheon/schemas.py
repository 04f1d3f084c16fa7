"""Flag schemas of the native commands that pantheon commands inherit."""

from __future__ import annotations

from pantheon.flags import FlagKind, FlagSchema, FlagSpec

FORMAT_FLAGS: FlagSchema = (
    FlagSpec(("block-size",), FlagKind.INT, "size of block in KiB", 4096),
    FlagSpec(("capacity",), FlagKind.INT, "hard quota of the volume limiting its usage of space in GiB", 0),
    FlagSpec(("inodes",), FlagKind.INT, "hard quota of the volume limiting its number of inodes", 0),
    FlagSpec(("compress",), FlagKind.STRING, "compression algorithm (lz4, zstd, none)", "none"),
    FlagSpec(("shards",), FlagKind.INT, "store the blocks into N buckets by hash of key", 0),
    FlagSpec(("storage",), FlagKind.STRING, "object storage type (e.g. s3, gs, oss, cos)", "file"),
    FlagSpec(("bucket",), FlagKind.STRING, "the bucket URL of object storage to store data"),
    FlagSpec(("access-key",), FlagKind.STRING, "access key for object storage"),
    FlagSpec(("secret-key",), FlagKind.STRING, "secret key for object storage"),
    FlagSpec(("session-token",), FlagKind.STRING, "session token for object storage"),
    FlagSpec(("storage-class",), FlagKind.STRING, "the default storage class"),
    FlagSpec(("encrypt-rsa-key",), FlagKind.STRING, "a path to RSA private key (PEM)"),
    FlagSpec(("encrypt-algo",), FlagKind.STRING, "encrypt algorithm (aes256gcm-rsa, chacha20-rsa)", "aes256gcm-rsa"),
    FlagSpec(("hash-prefix",), FlagKind.BOOL, "distribute objects to evenly prefixed keys"),
    FlagSpec(("trash-days",), FlagKind.INT, "number of days after which removed files will be permanently deleted", 1),
    FlagSpec(("enable-acl",), FlagKind.BOOL, "enable POSIX ACL"),
    FlagSpec(("force",), FlagKind.BOOL, "overwrite existing format"),
    FlagSpec(("no-update",), FlagKind.BOOL, "don't update existing volume"),
)

MOUNT_FLAGS: FlagSchema = (
    FlagSpec(("background", "d"), FlagKind.BOOL, "run in background"),
    FlagSpec(("log",), FlagKind.STRING, "path of log file when running in background"),
    FlagSpec(("pidfile",), FlagKind.STRING, "path of pid file when running in background"),
    FlagSpec(("update-fstab",), FlagKind.BOOL, "add / update entry in /etc/fstab"),
    FlagSpec(("no-syslog",), FlagKind.BOOL, "disable syslog"),
    FlagSpec(("options", "o"), FlagKind.STRING_LIST, "other FUSE options, repeatable"),
    FlagSpec(("attr-cache",), FlagKind.FLOAT, "attributes cache timeout in seconds", 1.0),
    FlagSpec(("entry-cache",), FlagKind.FLOAT, "file entry cache timeout in seconds", 1.0),
    FlagSpec(("dir-entry-cache",), FlagKind.FLOAT, "dir entry cache timeout in seconds", 1.0),
    FlagSpec(("subdir",), FlagKind.STRING, "mount a sub-directory as root"),
    FlagSpec(("read-only",), FlagKind.BOOL, "allow lookup/read operations only"),
    FlagSpec(("backup-meta",), FlagKind.STRING, "interval to automatically backup metadata in the object storage", "3600s"),
    FlagSpec(("buffer-size",), FlagKind.INT, "total read/write buffering in MiB", 300),
    FlagSpec(("prefetch",), FlagKind.INT, "prefetch N blocks in parallel", 1),
    FlagSpec(("writeback",), FlagKind.BOOL, "upload objects in background"),
    FlagSpec(("max-uploads",), FlagKind.INT, "number of connections to upload", 20),
    FlagSpec(("upload-limit",), FlagKind.INT, "bandwidth limit for upload in Mbps", 0),
    FlagSpec(("download-limit",), FlagKind.INT, "bandwidth limit for download in Mbps", 0),
    FlagSpec(("cache-dir",), FlagKind.STRING, "directory paths of local cache, use colon to separate multiple paths"),
    FlagSpec(("cache-size",), FlagKind.INT, "size of cached object for read in MiB", 102400),
    FlagSpec(("free-space-ratio",), FlagKind.FLOAT, "min free space ratio of cache disk", 0.1),
    FlagSpec(("cache-partial-only",), FlagKind.BOOL, "cache only random/small read"),
)

UMOUNT_FLAGS: FlagSchema = (
    FlagSpec(("force", "f"), FlagKind.BOOL, "force unmount a busy mount point"),
    FlagSpec(("flush",), FlagKind.BOOL, "wait for all staging chunks to be flushed"),
)


def without(schema: FlagSchema, *names: str) -> FlagSchema:
    """Return ``schema`` minus the flags whose canonical name is in ``names``."""

    dropped = set(names)
    return tuple(spec for spec in schema if spec.name not in dropped)


# The format command forces its own trash retention, see translator.FORCED_TRASH_DAYS.
PANTHEON_FORMAT_FLAGS: FlagSchema = without(FORMAT_FLAGS, "trash-days")
PANTHEON_MOUNT_FLAGS: FlagSchema = MOUNT_FLAGS
PANTHEON_UMOUNT_FLAGS: FlagSchema = UMOUNT_FLAGS
PANTHEON_CHECKPOINT_FLAGS: FlagSchema = ()
