import sys

def print_help():
    """Print comprehensive help information"""
    print("rlp-import - Decoder for files of concatenated RLP-encoded blocks")
    print("")
    print("LOCAL FILE COMMANDS:")
    print("  rlp-import <block_file> stats                         # Decode and show statistics")
    print("  rlp-import <block_file> block <number>                # Print a single block")
    print("  rlp-import <block_file> blocks <output_file>          # All blocks")
    print("  rlp-import <block_file> transactions <output_file>    # Transaction data only")
    print("  rlp-import <block_file> uncles <output_file>          # Uncle headers only")
    print("  rlp-import <block_file> withdrawals <output_file>     # Withdrawals (shanghai format)")
    print("  rlp-import <block_file> all <output_file>             # One file per data type")
    print("")
    print("REMOTE FILES:")
    print("  rlp-import --remote <url> <command> [output_file]     # Stream a block file over HTTP(S)")
    print("")
    print("BATCH PROCESSING:")
    print("  rlp-import --batch <pattern> <command> <base_output>  # Every file matching a glob or directory")
    print("")
    print("OPTIONS:")
    print("  --format legacy|london|shanghai   # Block format revision (trailing fields)")
    print("  --tolerant                        # Ignore unknown trailing fields instead of failing")
    print("  --no-validate                     # Skip extra_data/nonce length checks")
    print("  --threaded                        # Run exporters on a worker thread")
    print("  --debug                           # Print tracebacks on errors")
    print("")
    print("OUTPUT FORMATS: .json .jsonl .csv .parquet (written to $RLP_IMPORT_OUTPUT_DIR, default output/)")
    print("INPUT: raw, gzip (.gz) or snappy framed (.sz/.snappy) block files")


def main():
    """Main CLI entry point with command routing"""
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print_help()
        sys.exit(0 if len(sys.argv) >= 2 else 1)

    try:
        # Route to appropriate command handler
        first_arg = sys.argv[1]

        if first_arg == "--batch":
            from .commands.batch import BatchCommand
            command = BatchCommand()
            command.execute(sys.argv[2:])

        elif first_arg == "--remote":
            from .commands.remote import RemoteCommand
            command = RemoteCommand()
            command.execute(sys.argv[2:])  # Pass args without --remote

        elif first_arg.startswith('--'):
            print(f"❌ Unknown command: {first_arg}")
            print_help()
            sys.exit(1)

        else:
            # Local file processing
            from .commands.local import LocalCommand
            command = LocalCommand()
            command.execute(sys.argv[1:])

    except KeyboardInterrupt:
        print("\n⏹️  Operation cancelled by user")
        sys.exit(1)
    except Exception as e:
        print(f"❌ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
