"""
Sentinel errors.

Each sentinel is declared exactly once, here, and registered in the default
registry as a side effect of the declaration. Importing this module is the
single, ordered initialization step for the whole taxonomy.

Sentinels are frozen; raise ``ERR_X.wrap(cause)``, ``ERR_X.clone()`` or
``ERR_X.with_message(...)`` instead of the shared instance.
"""

from .registry import default_registry, register

# General
ERR_GENERAL_FAILURE = default_registry.fallback

# Cluster operations
ERR_K8S_RECONCILIATION_FAILED = register("k8s_reconciliation_failed", "reconciliation failed")

# API/HTTP operations
ERR_API_BAD_REQUEST = register("api_bad_request", "bad request")
ERR_API_EMPTY_PAYLOAD = register("api_empty_payload", "empty payload")
ERR_API_FOUND = register("api_found", "found")
ERR_API_INTERNAL_ERROR = register("api_internal_error", "internal error")
ERR_API_NOT_FOUND = register("api_not_found", "not found")
ERR_API_POST_FAILED = register("api_post_failed", "post failed")
ERR_API_RESPONSE_CODE_INVALID = register("api_response_code_invalid", "invalid API response code")
ERR_API_SERVER_FAULT = register("api_server_fault", "server fault")
ERR_API_SUCCESS = register("api_success", "success")

# Entity operations
ERR_ENTITY_DELETED = register("entity_deleted", "entity marked as deleted")
ERR_ENTITY_EXISTS = register("entity_exists", "entity already exists")
ERR_ENTITY_INVALID = register("entity_invalid", "entity is invalid")
ERR_ENTITY_LOAD_FAILED = register("entity_load_failed", "failed to load entity")
ERR_ENTITY_NOT_FOUND = register("entity_not_found", "entity not found")
ERR_ENTITY_QUERY_FAILED = register("entity_query_failed", "failed to query entities")
ERR_ENTITY_SAVE_FAILED = register("entity_save_failed", "failed to save entity")
ERR_ENTITY_VERSION_INVALID = register("entity_version_invalid", "invalid version")
ERR_ENTITY_VERSION_NOT_FOUND = register("entity_version_not_found", "version not found")

# State operations
ERR_STATE_ALREADY_INITIALIZED = register("state_already_initialized", "already initialized")
ERR_STATE_INITIALIZATION_FAILED = register("state_initialization_failed", "initialization failed")
ERR_STATE_NOT_ALIVE = register("state_not_alive", "not alive")
ERR_STATE_NOT_INITIALIZED = register("state_not_initialized", "not initialized")
ERR_STATE_NOT_READY = register("state_not_ready", "not ready")

# Policy/RBAC/ABAC
ERR_ACCESS_INVALID_PERMISSION = register("access_invalid_permission", "invalid permission")
ERR_ACCESS_UNAUTHORIZED = register("access_unauthorized", "unauthorized")

# CRUD operations
ERR_OBJECT_CREATION_FAILED = register("object_creation_failed", "creation failed")
ERR_OBJECT_DELETION_FAILED = register("object_deletion_failed", "deletion failed")
ERR_OBJECT_DELETION_SUCCESS = register("object_deletion_success", "deletion success")
ERR_OBJECT_UNDELETION_FAILED = register("object_undeletion_failed", "undeletion failed")
ERR_OBJECT_UNDELETION_SUCCESS = register("object_undeletion_success", "undeletion success")

# Root key management
ERR_ROOT_KEY_EMPTY = register("root_key_empty", "root key empty")
ERR_ROOT_KEY_MISSING = register("root_key_missing", "root key missing")
ERR_ROOT_KEY_NOT_EMPTY = register("root_key_not_empty", "root key not empty")
ERR_ROOT_KEY_SET_SUCCESS = register("root_key_set_success", "root key set success")
ERR_ROOT_KEY_SKIP_CREATION_FOR_IN_MEMORY_MODE = register("root_key_skip_creation_for_in_memory_mode", "root key skip creation for in memory mode")
ERR_ROOT_KEY_UPDATE_SKIPPED_KEY_EMPTY = register("root_key_update_skipped_key_empty", "root key update skipped key empty")

# Shamir secret sharing
ERR_SHAMIR_DUPLICATE_INDEX = register("shamir_duplicate_index", "shamir duplicate index")
ERR_SHAMIR_EMPTY_SHARD = register("shamir_empty_shard", "shamir empty shard")
ERR_SHAMIR_INVALID_INDEX = register("shamir_invalid_index", "shamir invalid index")
ERR_SHAMIR_NIL_SHARD = register("shamir_nil_shard", "shamir nil shard")
ERR_SHAMIR_NOT_ENOUGH_SHARDS = register("shamir_not_enough_shards", "shamir not enough shards")
ERR_SHAMIR_RECONSTRUCTION_FAILED = register("shamir_reconstruction_failed", "shamir reconstruction failed")

# Crypto operations
ERR_CRYPTO_CIPHER_NOT_AVAILABLE = register("crypto_cipher_not_available", "cipher not available")
ERR_CRYPTO_CIPHER_VERIFICATION_FAILED = register("crypto_cipher_verification_failed", "cipher verification failed")
ERR_CRYPTO_CIPHER_VERIFICATION_SUCCESS = register("crypto_cipher_verification_success", "cipher verification success")
ERR_CRYPTO_DECRYPTION_FAILED = register("crypto_decryption_failed", "decryption failed")
ERR_CRYPTO_ENCRYPTION_FAILED = register("crypto_encryption_failed", "encryption failed")
ERR_CRYPTO_FAILED_TO_CREATE_CIPHER = register("crypto_failed_to_create_cipher", "failed to create cipher")
ERR_CRYPTO_FAILED_TO_CREATE_GCM = register("crypto_failed_to_create_gcm", "failed to create GCM")
ERR_CRYPTO_FAILED_TO_READ_NONCE = register("crypto_failed_to_read_nonce", "failed to read nonce")
ERR_CRYPTO_FAILED_TO_READ_VERSION = register("crypto_failed_to_read_version", "failed to read version")
ERR_CRYPTO_INVALID_ENCRYPTION_KEY_LENGTH = register("crypto_invalid_encryption_key_length", "invalid encryption key length")
ERR_CRYPTO_LOW_ENTROPY = register("crypto_low_entropy", "low entropy")
ERR_CRYPTO_NONCE_GENERATION_FAILED = register("crypto_nonce_generation_failed", "nonce generation failed")
ERR_CRYPTO_RANDOM_GENERATION_FAILED = register("crypto_random_generation_failed", "random generation failed")

# Backing store
ERR_STORE_INVALID_CONFIGURATION = register("store_invalid_configuration", "invalid store configuration")
ERR_STORE_INVALID_ENCRYPTION_KEY = register("store_invalid_encryption_key", "invalid store encryption key")
ERR_STORE_RESULT_SET_FAILED_TO_LOAD = register("store_result_set_failed_to_load", "result set failed to load")

# Filesystem operations
ERR_FS_DIRECTORY_CREATION_FAILED = register("fs_directory_creation_failed", "directory creation failed")
ERR_FS_FAILED_TO_CHECK_DIRECTORY = register("fs_failed_to_check_directory", "failed to check directory")
ERR_FS_FAILED_TO_CREATE_DIRECTORY = register("fs_failed_to_create_directory", "failed to create directory")
ERR_FS_FAILED_TO_RESOLVE_PATH = register("fs_failed_to_resolve_path", "failed to resolve filesystem path")
ERR_FS_FILE_CLOSE_FAILED = register("fs_file_close_failed", "file close failed")
ERR_FS_FILE_IS_NOT_A_DIRECTORY = register("fs_file_is_not_a_directory", "file is not a directory")
ERR_FS_FILE_OPEN_FAILED = register("fs_file_open_failed", "file open failed")
ERR_FS_INVALID_DIRECTORY = register("fs_invalid_directory", "invalid directory")
ERR_FS_PARENT_DIRECTORY_DOES_NOT_EXIST = register("fs_parent_directory_does_not_exist", "parent directory does not exist")
ERR_FS_PATH_CANNOT_BE_EMPTY = register("fs_path_cannot_be_empty", "filesystem path cannot be empty")
ERR_FS_PATH_RESTRICTED = register("fs_path_restricted", "filesystem path is restricted for security reasons")
ERR_FS_STREAM_CLOSE_FAILED = register("fs_stream_close_failed", "stream close failed")
ERR_FS_STREAM_OPEN_FAILED = register("fs_stream_open_failed", "stream open failed")

# Data processing
ERR_DATA_INVALID_INPUT = register("data_invalid_input", "invalid input")
ERR_DATA_MARSHAL_FAILURE = register("data_marshal_failure", "failed to marshal response body")
ERR_DATA_PARSE_FAILURE = register("data_parse_failure", "failed to parse request body")
ERR_DATA_READ_FAILURE = register("data_read_failure", "failed to read request body")
ERR_DATA_UNMARSHAL_FAILURE = register("data_unmarshal_failure", "failed to unmarshal request body")

# String/template operations
ERR_STRING_EMPTY_CHARACTER_CLASS = register("string_empty_character_class", "empty character class")
ERR_STRING_INVALID_RANGE = register("string_invalid_range", "invalid character range")
ERR_STRING_EMPTY_CHARACTER_SET = register("string_empty_character_set", "character class resulted in empty set")
ERR_STRING_INVALID_LENGTH = register("string_invalid_length", "invalid length specification")
ERR_STRING_NEGATIVE_LENGTH = register("string_negative_length", "length cannot be negative")

# Network/peer
ERR_NET_PEER_CONNECTION = register("net_peer_connection", "problem connecting to peer")
ERR_NET_READING_REQUEST_BODY = register("net_reading_request_body", "problem reading request body")
ERR_NET_READING_RESPONSE_BODY = register("net_reading_response_body", "problem reading response body")
ERR_NET_URL_JOIN_PATH_FAILED = register("net_url_join_path_failed", "failed to join URL path")

# Transaction operations
ERR_TRANSACTION_BEGIN_FAILED = register("transaction_begin_failed", "failed to begin transaction")
ERR_TRANSACTION_COMMIT_FAILED = register("transaction_commit_failed", "failed to commit transaction")
ERR_TRANSACTION_FAILED = register("transaction_failed", "transaction failed")
ERR_TRANSACTION_ROLLBACK_FAILED = register("transaction_rollback_failed", "failed to rollback transaction")

# Recovery operations
ERR_RECOVERY_RETRY_FAILED = register("recovery_retry_failed", "recovery retry failed")
ERR_RECOVERY_RETRY_LIMIT_REACHED = register("recovery_retry_limit_reached", "recovery retry limit reached")
ERR_RECOVERY_FAILED = register("recovery_failed", "recovery failed")

# Retry framework
ERR_RETRY_MAX_ELAPSED_TIME_REACHED = register("retry_max_elapsed_time_reached", "maximum elapsed time for retries reached")
ERR_RETRY_CONTEXT_CANCELED = register("retry_context_canceled", "retry canceled by the caller")
ERR_RETRY_OPERATION_FAILED = register("retry_operation_failed", "retry operation failed")
ERR_RETRY_MAX_ATTEMPTS_REACHED = register("retry_max_attempts_reached", "maximum number of retry attempts reached")

# X509/SPIFFE
ERR_SPIFFE_EMPTY_TRUST_DOMAIN = register("spiffe_empty_trust_domain", "empty trust domain")
ERR_SPIFFE_FAILED_TO_CREATE_X509_SOURCE = register("spiffe_failed_to_create_x509_source", "failed to create X509Source")
ERR_SPIFFE_FAILED_TO_EXTRACT_X509_SVID = register("spiffe_failed_to_extract_x509_svid", "failed to extract X509 SVID")
ERR_SPIFFE_MULTIPLE_TRUST_DOMAINS = register("spiffe_multiple_trust_domains", "provide a single trust domain")
ERR_SPIFFE_NIL_X509_SOURCE = register("spiffe_nil_x509_source", "nil X509Source")
ERR_SPIFFE_NO_PEER_CERTIFICATES = register("spiffe_no_peer_certificates", "no peer certificates")
ERR_SPIFFE_UNABLE_TO_FETCH_X509_SOURCE = register("spiffe_unable_to_fetch_x509_source", "unable to fetch X509Source")
ERR_SPIFFE_FAILED_TO_CLOSE_SOURCE = register("spiffe_failed_to_close_source", "failed to close X509Source")
